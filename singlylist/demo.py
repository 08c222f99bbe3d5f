"""Small demonstration of the linked list operations."""

from __future__ import annotations

from collections.abc import Sequence

from singlylist.linked_list import LinkedList


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return an exit status."""
    values: LinkedList[int] = LinkedList()

    values.push_front(4)
    values.push_front(5)
    print(f"First value: {values.get(0)}")

    values.remove(0)
    print(f"First value: {values.get(0)}")
    values.remove(0)

    for number in (1, 2, 3, 4):
        values.push_back(number)

    values.remove(1)
    values.add_at(0, 0)
    values.remove(0)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())