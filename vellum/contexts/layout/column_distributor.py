"""
Column Distributor

Splits the ordered list of section ids into page columns according to a
template's column membership. Distribution is a stable partition: every id
lands in exactly one column and the relative order from the input is kept
within each column.

Membership precedence is left, then main, then right. Ids that belong to no
column (orphans, including unknown ids) are appended to the main column.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Sequence

from vellum.contexts.layout.defaults import SECTION_IDS
from vellum.contexts.layout.logger import _log_debug, _log_warning

SUPPORTED_COLUMN_COUNTS = (1, 2, 3)


# ============================================================================
# Column Dataclasses
# ============================================================================


@dataclass
class Column:
    """
    Column within a page.

    Attributes:
        name: "main" for single-column pages; "left"/"main"/"right" otherwise
        section_ids: Ordered section ids rendered in this column
    """

    name: str
    section_ids: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ColumnMembership:
    """
    Which sections a template places in each column.

    In a two-column page the columns are "left" and "main" (the main column
    sits on the right); "right" is only used by three-column pages.

    Attributes:
        left: Sidebar sections
        main: Main-column sections
        right: Third-column sections
    """

    left: FrozenSet[str] = frozenset()
    main: FrozenSet[str] = frozenset()
    right: FrozenSet[str] = frozenset()

    @classmethod
    def from_lists(
        cls,
        left: Optional[Iterable[str]] = None,
        main: Optional[Iterable[str]] = None,
        right: Optional[Iterable[str]] = None,
    ) -> "ColumnMembership":
        return cls(
            left=frozenset(left or ()),
            main=frozenset(main or ()),
            right=frozenset(right or ()),
        )

    def column_of(self, section_id: str, column_count: int = 3) -> Optional[str]:
        """
        Column a section belongs to, by precedence left, main, right.

        The right column only counts in three-column pages. Returns None for
        orphans.

        Example:
            >>> ColumnMembership.from_lists(left=["skills"], right=["skills", "awards"]).column_of("awards", 2) is None
            True
        """
        columns = [("left", self.left), ("main", self.main)]
        if column_count == 3:
            columns.append(("right", self.right))
        for name, members in columns:
            if section_id in members:
                return name
        return None


DEFAULT_MEMBERSHIP = ColumnMembership.from_lists(
    left=["skills", "education", "languages", "certificates", "interests", "awards", "references"],
    main=["summary", "work", "projects", "publications", "custom"],
)


# ============================================================================
# Order Repair
# ============================================================================


def complete_section_order(
    order: Sequence[str], known_ids: Sequence[str] = SECTION_IDS
) -> List[str]:
    """
    Repair a stored section order for rendering.

    Drops duplicates (first occurrence wins) and appends known ids that are
    missing. Unknown ids are kept so the distributor can treat them as orphans.

    Example:
        >>> complete_section_order(["work", "work", "extra"], ["summary", "work"])
        ['work', 'extra', 'summary']
    """
    seen = set()
    completed = []
    for section_id in order:
        if section_id in seen:
            continue
        seen.add(section_id)
        completed.append(section_id)

    missing = [section_id for section_id in known_ids if section_id not in seen]
    if missing:
        _log_debug(f"Appending sections missing from order: {missing}")
    return completed + missing


def normalize_section_order(
    order: Sequence[str], known_ids: Sequence[str] = SECTION_IDS
) -> List[str]:
    """
    Produce the editor view of a section order: known ids only, each once.

    Unknown ids and duplicates are dropped; missing known ids are appended in
    their default order. Reorder operations start from this view.

    Example:
        >>> normalize_section_order(["bogus", "work"], ["summary", "work"])
        ['work', 'summary']
    """
    known = set(known_ids)
    return [section_id for section_id in complete_section_order(order, known_ids) if section_id in known]


# ============================================================================
# Distribution
# ============================================================================


def distribute(
    order: Sequence[str],
    column_count: int,
    membership: ColumnMembership = DEFAULT_MEMBERSHIP,
) -> List[Column]:
    """
    Partition an ordered list of section ids into columns.

    Args:
        order: Section ids in display order
        column_count: 1, 2 or 3 (anything else is treated as 1)
        membership: Template column membership

    Returns:
        1 column: [main] with the order unchanged
        2 columns: [left, main]
        3 columns: [left, main, right]

    Example:
        >>> membership = ColumnMembership.from_lists(left=["skills"], main=["summary", "work"])
        >>> [c.section_ids for c in distribute(["summary", "skills", "work", "custom-x"], 2, membership)]
        [['skills'], ['summary', 'work', 'custom-x']]
    """
    if column_count not in SUPPORTED_COLUMN_COUNTS or isinstance(column_count, bool):
        _log_warning(f"Unsupported column count {column_count!r}; using a single column")
        column_count = 1

    if column_count == 1:
        return [Column(name="main", section_ids=list(order))]

    columns = {name: Column(name=name) for name in ("left", "main", "right")}

    seen = set()
    orphans = []
    for section_id in order:
        if section_id in seen:
            continue
        seen.add(section_id)

        name = membership.column_of(section_id, column_count)
        if name is None:
            orphans.append(section_id)
        else:
            columns[name].section_ids.append(section_id)

    if orphans:
        _log_debug(f"Placing orphan sections in main column: {orphans}")
        columns["main"].section_ids.extend(orphans)

    if column_count == 2:
        return [columns["left"], columns["main"]]
    return [columns["left"], columns["main"], columns["right"]]
