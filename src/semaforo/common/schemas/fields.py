from typing import Annotated
from pydantic import Field

# Range of the Integer columns (32-bit INT on MySQL / Postgres)
INT_MIN = -2**31
INT_MAX = 2**31 - 1

ColumnInt = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]
