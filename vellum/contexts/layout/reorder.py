"""
Reorder Controller

Pure operations that move a section within an ordering. Both return a new
list that is a permutation of the input and never mutate their argument.
"""

from typing import List, Sequence

DIRECTIONS = ("up", "down")


def move_by_drag(order: Sequence[str], from_id: str, to_id: str) -> List[str]:
    """
    Move `from_id` to the position currently held by `to_id`.

    Splice semantics: the element is removed from its old index and inserted
    at the target's index, shifting the elements in between.

    Args:
        order: Current section order
        from_id: Id being dragged
        to_id: Id it was dropped on

    Returns:
        New order (a copy of the input when the move is a no-op)

    Example:
        >>> move_by_drag(["a", "b", "c", "d"], "a", "c")
        ['b', 'c', 'a', 'd']
    """
    result = list(order)
    if from_id == to_id or from_id not in result or to_id not in result:
        return result

    old_index = result.index(from_id)
    new_index = result.index(to_id)
    result.insert(new_index, result.pop(old_index))
    return result


def swap_adjacent(order: Sequence[str], index: int, direction: str = "up") -> List[str]:
    """
    Exchange the element at `index` with its neighbour.

    Args:
        order: Current section order
        index: Position of the element to move
        direction: "up" swaps with index-1, "down" with index+1

    Returns:
        New order; unchanged copy at the boundaries or for invalid arguments

    Example:
        >>> swap_adjacent(["work", "education", "skills"], 1)
        ['education', 'work', 'skills']
    """
    result = list(order)
    if direction not in DIRECTIONS:
        return result

    target = index - 1 if direction == "up" else index + 1
    if not (0 <= index < len(result)) or not (0 <= target < len(result)):
        return result

    result[index], result[target] = result[target], result[index]
    return result
