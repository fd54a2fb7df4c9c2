"""An editable list of number lists with undo history."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional, Sequence, Union

from .generators import VecKeyword, generate, parse_keyword, transposed

MAX_HISTORY = 100
MAX_INSERT_PADDING = 1024
NULL = "null"

Container = list[list[float]]
Atom = Union[float, str]


class MultilistError(ValueError):
    """Raised when input to a multilist is missing or malformed."""


class IndexOutOfBounds(MultilistError, IndexError):
    """Raised when an index does not address a valid position."""

    def __init__(self, index: int) -> None:
        super().__init__(f"index {index} out of bounds")
        self.index = index


def _number(value: object) -> float:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    raise MultilistError(f"expected a number, got {value!r}")


def _numbers(values: Iterable[object]) -> list[float]:
    if isinstance(values, str):
        raise MultilistError(f"expected a list of numbers, got {values!r}")
    if isinstance(values, (int, float)):
        return [_number(values)]
    return [_number(v) for v in values]


def _index(value: object) -> int:
    return int(_number(value))


def _is_null(items: Sequence[object]) -> bool:
    return not items or (
        len(items) == 1 and isinstance(items[0], str) and items[0].lower() == NULL
    )


def _parse_container(value: object, null_as_empty: bool) -> Container:
    """Parse nested lists, bracketed atoms or plain numbers into a list of lists.

    Plain numbers become one single-valued list each, ``"["`` ... ``"]"`` group
    values into one list and ``"null"`` stands for an empty list. A value that is
    null as a whole gives ``[]`` if ``null_as_empty`` is set, otherwise ``[[]]``.
    """
    if value is None:
        return [] if null_as_empty else [[]]
    if isinstance(value, (int, float)):
        return [[_number(value)]]
    items = [value] if isinstance(value, str) else list(value)
    if _is_null(items):
        return [] if null_as_empty else [[]]

    voices: Container = []
    current: Optional[list[float]] = None
    for token in items:
        if isinstance(token, str):
            word = token.lower()
            if word == "[":
                if current is not None:
                    raise MultilistError("nested brackets are not supported")
                current = []
            elif word == "]":
                if current is None:
                    raise MultilistError("unmatched closing bracket")
                voices.append(current)
                current = None
            elif word == NULL and current is None:
                voices.append([])
            else:
                raise MultilistError(f"unexpected symbol {token!r}")
        elif isinstance(token, (list, tuple)):
            if current is not None:
                raise MultilistError("nested lists are not supported")
            voices.append(_numbers(token))
        else:
            number = _number(token)
            if current is None:
                voices.append([number])
            else:
                current.append(number)
    if current is not None:
        raise MultilistError("unmatched opening bracket")
    return voices


def _format(items: Container) -> list[Atom]:
    """Format a container as atoms; empty and empty-like both give ``["null"]``."""
    if not items or (len(items) == 1 and not items[0]):
        return [NULL]
    if all(len(voice) == 1 for voice in items):
        return [voice[0] for voice in items]
    atoms: list[Atom] = []
    for voice in items:
        if voice:
            atoms.extend(["[", *voice, "]"])
        else:
            atoms.append(NULL)
    return atoms


def _copy(items: Container) -> Container:
    return [list(voice) for voice in items]


class Multilist:
    """A list of number lists, edited by messages, with a bounded undo history.

    Methods that correspond to messages which trigger output return the
    formatted new state; ``set`` and ``set_singular`` update silently.
    """

    def __init__(self, initial: object = None, max_history: int = MAX_HISTORY) -> None:
        self._items: Container = []
        self._history: deque[Container] = deque(maxlen=max(0, int(max_history)))

        if initial is None:
            return
        if isinstance(initial, (list, tuple)) and not initial:
            return
        if isinstance(initial, (list, tuple, str)):
            args = [initial] if isinstance(initial, str) else list(initial)
            keyword = parse_keyword(args)
            if keyword is not None:
                self._reset_container(transposed(generate(keyword, args[1:])))
                return
        self._reset_container(_parse_container(initial, True))

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    def reset(self, value: object) -> list[Atom]:
        """Replace the whole multilist and return the formatted new state."""
        self._replace_all(_parse_container(value, False))
        return self.format()

    def set(self, value: object) -> None:
        """Replace the whole multilist without output."""
        self._replace_all(_parse_container(value, False))

    def singular(self, values: Iterable[object]) -> list[Atom]:
        """Make the multilist a single list and return the formatted new state."""
        self._replace_all([_numbers(values)])
        return self.format()

    def set_singular(self, values: Iterable[object]) -> None:
        """Make the multilist a single list without output."""
        self._replace_all([_numbers(values)])

    def append(self, values: Iterable[object]) -> list[Atom]:
        """Append one list."""
        voice = _numbers(values)
        self._push_history()
        self._items.append(voice)
        return self.format()

    def extend(self, args: Sequence[object]) -> list[Atom]:
        """Extend by another multilist, or by a generator such as ``["range", 4]``."""
        args = [args] if isinstance(args, str) else list(args)
        if not args:
            raise MultilistError('too few arguments for message "extend"')
        keyword = parse_keyword(args)
        if keyword is not None:
            addition = transposed(generate(keyword, args[1:]))
        else:
            addition = _parse_container(args, True)
        self._push_history()
        self._items.extend(addition)
        return self.format()

    def insert(self, index: object, values: Iterable[object]) -> list[Atom]:
        """Insert a list at ``index``.

        Negative indices count from the end, ``-1`` appending. An index past the
        end pads the multilist with empty lists first.
        """
        position = _index(index)
        voice = _numbers(values)

        n_pad = max(0, position - len(self._items))
        if n_pad > MAX_INSERT_PADDING:
            raise MultilistError(f"index too large: {position}")

        padded = _copy(self._items) + [[] for _ in range(n_pad)]
        bounded = self._bound(position, len(padded), after=True)

        self._push_history()
        padded.insert(bounded, voice)
        self._items = padded
        return self.format()

    def replace(self, index: object, values: Iterable[object]) -> list[Atom]:
        """Replace the list at ``index``. This change is not recorded for undo."""
        bounded = self.bounded_index(_index(index))
        self._items[bounded] = _numbers(values)
        return self.format()

    def remove(self, *args: object) -> list[Atom]:
        """Remove the lists at all given indices; nothing is removed if any is invalid."""
        if not args:
            raise MultilistError('too few arguments for message "remove"')
        indices = {self.bounded_index(_index(arg)) for arg in args}
        self._push_history()
        self._items = [v for i, v in enumerate(self._items) if i not in indices]
        return self.format()

    def undo(self) -> bool:
        """Restore the previous state; return False if there is no history."""
        if not self._history:
            return False
        self._items = self._history.pop()
        return True

    def clear(self) -> list[Atom]:
        """Remove every list."""
        self._push_history()
        self._items = []
        return self.format()

    def generate(self, keyword: Union[VecKeyword, str], *args: object) -> list[Atom]:
        """Replace the multilist by generator output, one value per list."""
        self._reset_container(transposed(generate(keyword, args)))
        return self.format()

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    def bounded_index(self, index: int, after: bool = False) -> int:
        """Map a possibly negative index to a position, or raise IndexOutOfBounds.

        With ``after`` the position just past the end is valid too.
        """
        return self._bound(index, len(self._items), after)

    def format(self) -> list[Atom]:
        """The current state as a flat list of atoms."""
        return _format(self._items)

    @property
    def value(self) -> Container:
        """A copy of the current state."""
        return _copy(self._items)

    def __iter__(self) -> Iterator[list[float]]:
        return iter(_copy(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Multilist({self._items!r})"

    # ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    @staticmethod
    def _bound(index: int, size: int, after: bool) -> int:
        limit = size + 1 if after else size
        if -limit <= index < limit:
            return index if index >= 0 else limit + index
        raise IndexOutOfBounds(index)

    def _push_history(self) -> None:
        self._history.append(_copy(self._items))

    def _replace_all(self, items: Container) -> None:
        self._push_history()
        self._items = items

    def _reset_container(self, items: Container) -> None:
        self._replace_all(_copy(items))