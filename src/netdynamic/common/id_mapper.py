"""
Vertex re-index mapping for extracted snapshots.

Point and interval extraction keep only the vertices active in the query
window and renumber them densely (0, 1, 2, ...) because networkit graphs
require consecutive integer node ids. IDMapper records the correspondence
between a vertex id in the dynamic network and its id in the snapshot.
"""

from typing import Dict, Iterable, List


class IDMapper:
    """
    Bidirectional mapping between dynamic-network vertex ids and snapshot ids.

    Attributes
    ----------
    original_to_internal : Dict[int, int]
        Maps vertex ids of the dynamic network to snapshot ids
    internal_to_original : Dict[int, int]
        Maps snapshot ids back to vertex ids of the dynamic network

    Examples
    --------
    >>> mapper = IDMapper.from_vertices([1, 3, 4])
    >>> mapper.get_internal(3)
    1
    >>> mapper.get_original(2)
    4

    Notes
    -----
    Snapshot ids are always consecutive integers starting from 0.
    """

    def __init__(self) -> None:
        self.original_to_internal: Dict[int, int] = {}
        self.internal_to_original: Dict[int, int] = {}

    @classmethod
    def from_vertices(cls, vertices: Iterable[int]) -> 'IDMapper':
        """
        Build a dense mapping from an ordered sequence of retained vertices.

        The i-th vertex of ``vertices`` receives snapshot id ``i``.
        """
        mapper = cls()
        for internal_id, original_id in enumerate(vertices):
            mapper.add_mapping(original_id, internal_id)
        return mapper

    def get_internal(self, original_id: int) -> int:
        """
        Get the snapshot id of a dynamic-network vertex.

        Raises
        ------
        KeyError
            If the vertex was not retained in the snapshot
        """
        try:
            return self.original_to_internal[original_id]
        except KeyError:
            raise KeyError(f"Original ID '{original_id}' not found in mapping")

    def get_original(self, internal_id: int) -> int:
        """
        Get the dynamic-network vertex id of a snapshot vertex.

        Raises
        ------
        KeyError
            If internal_id is not a snapshot vertex
        TypeError
            If internal_id is not an integer
        """
        if not isinstance(internal_id, int):
            raise TypeError(f"Internal ID must be integer, got {type(internal_id)}")

        try:
            return self.internal_to_original[internal_id]
        except KeyError:
            raise KeyError(f"Internal ID {internal_id} not found in mapping")

    def get_original_batch(self, internal_ids: List[int]) -> List[int]:
        """Translate a list of snapshot ids back to dynamic-network vertex ids."""
        return [self.get_original(internal_id) for internal_id in internal_ids]

    def add_mapping(self, original_id: int, internal_id: int) -> None:
        """
        Add a new id pair.

        Raises
        ------
        ValueError
            If either id is already mapped, or internal_id is negative
        TypeError
            If internal_id is not an integer
        """
        if not isinstance(internal_id, int):
            raise TypeError(f"Internal ID must be integer, got {type(internal_id)}")

        if internal_id < 0:
            raise ValueError(f"Internal ID must be non-negative, got {internal_id}")

        if original_id in self.original_to_internal:
            existing_internal = self.original_to_internal[original_id]
            raise ValueError(
                f"Original ID '{original_id}' already mapped to internal ID {existing_internal}"
            )

        if internal_id in self.internal_to_original:
            existing_original = self.internal_to_original[internal_id]
            raise ValueError(
                f"Internal ID {internal_id} already mapped to original ID '{existing_original}'"
            )

        self.original_to_internal[original_id] = internal_id
        self.internal_to_original[internal_id] = original_id

    def has_original(self, original_id: int) -> bool:
        return original_id in self.original_to_internal

    def has_internal(self, internal_id: int) -> bool:
        return internal_id in self.internal_to_original

    def size(self) -> int:
        """Number of mapped vertices."""
        return len(self.original_to_internal)

    def is_empty(self) -> bool:
        return len(self.original_to_internal) == 0

    def to_dict(self) -> Dict[str, Dict]:
        """Export both directions as plain dictionaries."""
        return {
            'original_to_internal': dict(self.original_to_internal),
            'internal_to_original': dict(self.internal_to_original)
        }

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, original_id: object) -> bool:
        """Membership tests the dynamic-network side of the mapping."""
        return original_id in self.original_to_internal

    def __repr__(self) -> str:
        return f"IDMapper(size={self.size()})"
