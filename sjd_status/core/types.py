from __future__ import annotations

from typing import TypeAlias

Row: TypeAlias = dict[str, object]
RowSet: TypeAlias = list[Row]
