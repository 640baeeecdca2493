"""
Conversion between dynamic networks, static networks and spell tables.

- :func:`as_dynamic_network` lifts a static network into a dynamic one with
  every vertex and edge active over a single period.
- :func:`spells_to_dataframe` lays the vertex or edge spells out as a Polars
  DataFrame, one row per spell.
- :func:`dynamic_network_from_spells` builds a dynamic network from such
  tables.

These are in-memory conversions only; reading or writing files is left to
Polars.
"""

from typing import Any, Dict, List, Optional, Tuple, Union

import networkit as nk
import polars as pl

from ..common.exceptions import ConfigurationError, validate_parameter
from ..common.logging_config import get_logger, log_function_entry, LoggingTimer
from ..common.validators import validate_spell_dataframe
from ..temporal.spell import Spell
from .activity import Edge, Vertex
from .dynamic import DynamicNetwork
from .static import StaticNetwork

logger = get_logger(__name__)

SPELL_KINDS = ["vertex", "edge"]
CENSOR_COLS = ("onset_censored", "terminus_censored")


def as_dynamic_network(
    network: Union[StaticNetwork, nk.Graph],
    onset: Any = 0.0,
    terminus: Any = 1.0
) -> DynamicNetwork:
    """
    Convert a static network into a dynamic network active over ``[onset, terminus)``.

    Every vertex and every edge receives the single spell
    ``[onset, terminus)``, the observation period is set to the same bounds,
    and static vertex attributes are carried over.

    Parameters
    ----------
    network : Union[StaticNetwork, nk.Graph]
        Static network to convert; a bare networkit graph is wrapped first
    onset, terminus : Any, default 0.0, 1.0
        Activity period

    Returns
    -------
    DynamicNetwork

    Examples
    --------
    >>> static = StaticNetwork(3, directed=False)
    >>> static.add_edge(0, 1)
    >>> dnet = as_dynamic_network(static, onset=0.0, terminus=10.0)
    >>> network_collapse(dnet).edge_set() == static.edge_set()
    True
    """
    if isinstance(network, nk.Graph):
        network = StaticNetwork.from_graph(network)

    log_function_entry("as_dynamic_network", n=network.number_of_vertices(),
                       onset=onset, terminus=terminus)

    dnet = DynamicNetwork(
        network.number_of_vertices(),
        observation_start=onset,
        observation_end=terminus,
        directed=network.is_directed()
    )

    spell = Spell(onset, terminus)
    for v in network.vertices():
        dnet.add_spell(spell, Vertex(v))
        for name, value in network.vertex_attributes(v).items():
            dnet.set_vertex_attribute(v, name, value)

    for i, j in network.iter_edges():
        dnet.add_spell(spell, Edge(i, j))

    return dnet


def spells_to_dataframe(dnet: DynamicNetwork, kind: str = "edge") -> pl.DataFrame:
    """
    Lay out vertex or edge spells as a table, one row per spell.

    Parameters
    ----------
    dnet : DynamicNetwork
        Network whose spells are exported
    kind : str, default "edge"
        ``"vertex"`` for columns ``vertex_id``, ``"edge"`` for ``tail, head``

    Returns
    -------
    pl.DataFrame
        Key column(s) followed by ``onset, terminus, duration,
        onset_censored, terminus_censored``, sorted by key then onset

    Raises
    ------
    ConfigurationError
        If kind is not ``"vertex"`` or ``"edge"``
    """
    validate_parameter(kind, SPELL_KINDS, "kind", "spells_to_dataframe")

    if kind == "vertex":
        key_cols = ["vertex_id"]
        keyed = [((v,), spells) for v, spells in dnet.get_vertex_activity().items()]
    else:
        key_cols = ["tail", "head"]
        keyed = [(edge, spells) for edge, spells in dnet.get_edge_activity().items()]

    columns: Dict[str, List[Any]] = {
        col: [] for col in key_cols + ["onset", "terminus", "duration", *CENSOR_COLS]
    }
    for key, spells in sorted(keyed):
        for spell in spells:
            for col, value in zip(key_cols, key):
                columns[col].append(value)
            columns["onset"].append(spell.onset)
            columns["terminus"].append(spell.terminus)
            columns["duration"].append(spell.duration)
            columns["onset_censored"].append(spell.onset_censored)
            columns["terminus_censored"].append(spell.terminus_censored)

    schema_overrides = {col: pl.Int64 for col in key_cols}
    schema_overrides.update({col: pl.Boolean for col in CENSOR_COLS})

    df = pl.DataFrame(columns, schema_overrides=schema_overrides)
    logger.debug(f"Exported {len(df)} {kind} spells")
    return df


def dynamic_network_from_spells(
    edge_spells: pl.DataFrame,
    vertex_spells: Optional[pl.DataFrame] = None,
    n: Optional[int] = None,
    directed: bool = True,
    observation_period: Optional[Tuple[Any, Any]] = None,
    tail_col: str = "tail",
    head_col: str = "head",
    vertex_col: str = "vertex_id",
    onset_col: str = "onset",
    terminus_col: str = "terminus"
) -> DynamicNetwork:
    """
    Build a dynamic network from spell tables.

    Parameters
    ----------
    edge_spells : pl.DataFrame
        One row per edge spell with tail, head, onset and terminus columns.
        Optional boolean ``onset_censored`` / ``terminus_censored`` columns
        are honored.
    vertex_spells : pl.DataFrame, optional
        One row per vertex spell with vertex id, onset and terminus columns
    n : int, optional
        Number of vertices. Defaults to one more than the largest vertex id
        referenced by either table.
    directed : bool, default True
        Whether edges are directed
    observation_period : Tuple[Any, Any], optional
        Observation window. Defaults to the earliest onset and latest
        terminus in the tables, or ``(0.0, 1.0)`` when both are empty.
    tail_col, head_col, vertex_col, onset_col, terminus_col : str
        Column names

    Returns
    -------
    DynamicNetwork

    Raises
    ------
    ValidationError
        If a table is malformed
    InvalidInterval
        If a row has ``onset > terminus``
    ConfigurationError
        If ``n`` is smaller than the referenced vertex ids

    Examples
    --------
    >>> edges = pl.DataFrame({"tail": [0, 1], "head": [1, 2],
    ...                       "onset": [0.0, 5.0], "terminus": [10.0, 15.0]})
    >>> dnet = dynamic_network_from_spells(edges, directed=False)
    >>> dnet.number_of_vertices(), dnet.number_of_edges()
    (3, 2)
    """
    log_function_entry("dynamic_network_from_spells", n=n, directed=directed)

    tables = [(edge_spells, [tail_col, head_col])]
    if vertex_spells is not None:
        tables.append((vertex_spells, [vertex_col]))

    for df, key_cols in tables:
        validate_spell_dataframe(
            df, key_cols, onset_col, terminus_col,
            censor_cols=[col for col in CENSOR_COLS if col in df.columns]
        )

    max_id = max(
        (df[col].max() for df, key_cols in tables for col in key_cols if not df.is_empty()),
        default=-1
    )
    if n is None:
        n = max_id + 1
    elif n <= max_id:
        raise ConfigurationError(
            f"n={n} is too small for vertex id {max_id}",
            parameter="n",
            value=n,
            function="dynamic_network_from_spells"
        )

    if observation_period is None:
        observation_period = _data_period(tables, onset_col, terminus_col)

    with LoggingTimer("dynamic_network_from_spells",
                      {"n_vertices": n, "n_edge_spells": len(edge_spells)}):
        dnet = DynamicNetwork(
            n,
            observation_start=observation_period[0],
            observation_end=observation_period[1],
            directed=directed
        )

        if vertex_spells is not None:
            for row in vertex_spells.iter_rows(named=True):
                dnet.add_spell(_row_spell(row, onset_col, terminus_col), Vertex(row[vertex_col]))

        for row in edge_spells.iter_rows(named=True):
            dnet.add_spell(
                _row_spell(row, onset_col, terminus_col),
                Edge(row[tail_col], row[head_col])
            )

    logger.info(f"Built {dnet!r} from spell tables")
    return dnet


def _row_spell(row: Dict[str, Any], onset_col: str, terminus_col: str) -> Spell:
    return Spell(
        row[onset_col],
        row[terminus_col],
        onset_censored=bool(row.get("onset_censored", False)),
        terminus_censored=bool(row.get("terminus_censored", False))
    )


def _data_period(tables, onset_col: str, terminus_col: str) -> Tuple[Any, Any]:
    """Earliest onset and latest terminus over all non-empty tables."""
    onsets = [df[onset_col].min() for df, _ in tables if not df.is_empty()]
    termini = [df[terminus_col].max() for df, _ in tables if not df.is_empty()]
    if not onsets:
        return (0.0, 1.0)
    return (min(onsets), max(termini))
