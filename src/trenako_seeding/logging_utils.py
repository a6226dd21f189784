from __future__ import annotations

import logging
from enum import Enum
from typing import Any, cast

import pandas as pd
from rich import box
from rich.console import Console, JustifyMethod
from rich.logging import RichHandler
from rich.style import StyleType
from rich.table import Table

__all__ = ["Colors", "RichLogger", "logger", "setup_rich_logging"]


class Colors(Enum):
    PRIMARY = "#87AFA3"


class RichLogger:
    """Namespaced ``trenako_seeding`` logger rendering through rich on stderr."""

    def __init__(
        self,
        level: int = logging.INFO,
    ) -> None:
        self.console = Console(stderr=True)
        self.handler = RichHandler(
            console=self.console,
            show_path=False,
            markup=False,
            show_time=True,
            rich_tracebacks=True,
        )

        self._logger = logging.getLogger("trenako_seeding")
        self._logger.setLevel(level)
        self._logger.addHandler(self.handler)
        self._logger.propagate = False

    @property
    def level(self) -> int:
        return self._logger.level

    def setLevel(self, level: int) -> None:
        self._logger.setLevel(level)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)

    def table(
        self,
        title: str,
        *,
        max_cell_width: int = 100,
        **columns: Any,
    ) -> None:
        column_names = list(columns.keys())
        assert len(column_names) > 0, "Must provide at least one column"
        n_rows = len(columns[column_names[0]])
        assert all(len(columns[name]) == n_rows for name in column_names), (
            "All columns must have the same number of rows"
        )

        table = Table(
            title=title,
            box=box.ASCII_DOUBLE_HEAD,
            title_style=f"bold {Colors.PRIMARY.value}",
            title_justify="left",
        )

        for name in column_names:
            justify: JustifyMethod = "left"
            style: StyleType | None = None
            if n_rows and isinstance(columns[name][0], int | float):
                justify = "right"
                style = "bold cyan"

            table.add_column(str(name), overflow="fold", justify=justify, style=style)

        for row_idx in range(n_rows):
            row_values: list[str] = []
            for name in column_names:
                value = columns[name][row_idx]
                cell = "" if value is None else str(value)
                if max_cell_width and len(cell) > max_cell_width:
                    side_len = max_cell_width // 2
                    cell = cell[:side_len] + " … " + cell[-side_len:]
                row_values.append(cell)

            table.add_row(*row_values)

        self.console.print(table)

    def df(
        self,
        title: str,
        df: pd.DataFrame,
        *,
        max_rows: int | None = None,
        max_cell_width: int = 100,
    ) -> None:
        print_df = df if max_rows is None else df.head(n=max_rows)
        columns = cast(dict[str, list[Any]], print_df.to_dict(orient="list"))
        self.table(title, max_cell_width=max_cell_width, **columns)


logger = RichLogger(level=logging.INFO)


def setup_rich_logging(verbose: bool = False) -> None:
    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
