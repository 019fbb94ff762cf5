"""
Semaforo: traffic snapshots and signal-timing prediction store.
"""
__version__ = "0.1.0"
