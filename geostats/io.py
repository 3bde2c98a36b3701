"""Reading georeferenced tables from disk."""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from geostats.errors import ConstructionError
from geostats.geostats_logging import create_module_logger
from geostats.spatialdata import PointSetData

_geostats_logger = create_module_logger()


def read_geotable(
    filepath_or_buffer, coordnames: Sequence[str] = ("x", "y", "z"), **kwargs
) -> PointSetData:
    """Read a delimited table into point set data.

    Columns named in coordnames become the point coordinates, in coordnames order;
    names that are not in the table are skipped. Every other column becomes a
    variable.

    Args:
        filepath_or_buffer: anything accepted by ``pandas.read_csv``
        coordnames: candidate names of the coordinate columns
        kwargs: forwarded to ``pandas.read_csv``

    Returns:
        PointSetData: the table georeferenced by its coordinate columns

    Raises:
        ConstructionError: if none of coordnames is a column of the table
    """
    table = pd.read_csv(filepath_or_buffer, **kwargs)

    coordcols = [name for name in coordnames if name in table.columns]
    if not coordcols:
        raise ConstructionError(
            "coordnames",
            f"none of {list(coordnames)} found in columns {list(table.columns)}",
        )
    varcols = [name for name in table.columns if name not in coordcols]
    _geostats_logger.debug(
        f"read {len(table)} rows with coordinates {coordcols} and variables {varcols}"
    )

    coords = table[coordcols].to_numpy().T
    data = {str(name): table[name].to_numpy() for name in varcols}
    return PointSetData(data, coords)
