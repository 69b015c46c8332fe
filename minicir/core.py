"""Core IR value graph: values, def-use edges, users, constants and global values."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from minicir.irtypes import Type

IR_GLOBAL_VARNAME_PREFIX = "@"
IR_LOCAL_VARNAME_PREFIX = "%l"
IR_TEMP_VARNAME_PREFIX = "%t"
IR_MEM_VARNAME_PREFIX = "%m"
IR_LABEL_PREFIX = ".L"

IR_KEYWORD_DECLARE = "declare"
IR_KEYWORD_DEFINE = "define"
IR_KEYWORD_ADD_I = "add"
IR_KEYWORD_SUB_I = "sub"


class Linkage(enum.Enum):
    """Whether a global is visible outside its module."""

    EXTERNAL = 0
    INTERNAL = 1


class Visibility(enum.Enum):
    """Visibility style of a global."""

    DEFAULT = 0
    HIDDEN = 1
    PROTECTED = 2


class Value:
    """Anything that has a type and can be used as an operand."""

    def __init__(self, type: Type, name: str = "") -> None:
        self.type = type
        self.name = name
        self.ir_name = ""
        self._uses: list[Use] = []

    @property
    def uses(self) -> tuple[Use, ...]:
        """Every def-use edge that uses this value."""
        return tuple(self._uses)

    def add_use(self, use: Use) -> None:
        """Record an edge that uses this value."""
        self._uses.append(use)

    def remove_use(self, use: Use) -> None:
        """Forget an edge that used this value; unknown edges are ignored."""
        for index, existing in enumerate(self._uses):
            if existing is use:
                del self._uses[index]
                return

    @property
    def scope_level(self) -> int:
        """Scope level of the variable, or -1 when not a scoped variable."""
        return -1

    @property
    def reg_id(self) -> int:
        """Allocated register number, or -1 when none."""
        return -1

    def memory_addr(self) -> tuple[int, int] | None:
        """Base register and offset for memory values, otherwise None."""
        return None

    @property
    def load_reg_id(self) -> int:
        """Register used to load this value, or -1 when none.

        Plain values have no load register; subclasses that keep one
        define their own writable property.
        """
        return -1

    def __repr__(self) -> str:
        label = self.ir_name or self.name
        return f"<{type(self).__name__} {label!r}: {self.type}>"


class Use:
    """A def-use edge from a defined value (usee) to the user that reads it.

    Creating a Use does not register it on either end; the caller does that.
    """

    def __init__(self, usee: Value, user: User) -> None:
        self._usee = usee
        self._user = user

    @property
    def usee(self) -> Value:
        """The value being used."""
        return self._usee

    @property
    def user(self) -> User:
        """The user reading the value."""
        return self._user

    def set_usee(self, value: Value) -> None:
        """Point this edge at another value, updating both values' use lists."""
        self._usee.remove_use(self)
        self._usee = value
        self._usee.add_use(self)

    def remove(self) -> None:
        """Detach the edge from both its value and its user."""
        self._usee.remove_use(self)
        self._user.remove_operand_raw(self)

    def __repr__(self) -> str:
        return f"<Use {self._usee!r} by {self._user!r}>"


class User(Value):
    """A value computed from operand values."""

    def __init__(self, type: Type) -> None:
        super().__init__(type)
        self._operands: list[Use] = []

    @property
    def operands(self) -> tuple[Use, ...]:
        """The operand edges, in order."""
        return tuple(self._operands)

    @property
    def operand_count(self) -> int:
        """Number of operands."""
        return len(self._operands)

    def operand_values(self) -> list[Value]:
        """The operand values, in order."""
        return [use.usee for use in self._operands]

    def iter_operands(self) -> Iterator[Value]:
        """Iterate over the operand values."""
        return (use.usee for use in self._operands)

    def operand(self, pos: int) -> Value | None:
        """Return the operand at ``pos``, or None when out of range."""
        if 0 <= pos < len(self._operands):
            return self._operands[pos].usee
        return None

    def set_operand(self, pos: int, value: Value) -> None:
        """Replace the operand at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self._operands):
            self._operands[pos].set_usee(value)

    def add_operand(self, value: Value) -> None:
        """Append ``value`` as a new operand."""
        use = Use(value, self)
        self._operands.append(use)
        value.add_use(use)

    def remove_operand(self, value: Value) -> None:
        """Remove the first operand edge that uses ``value``."""
        for use in self._operands:
            if use.usee is value:
                use.remove()
                return

    def remove_operand_at(self, pos: int) -> None:
        """Remove the operand at ``pos``; out-of-range positions are ignored."""
        if 0 <= pos < len(self._operands):
            self._operands[pos].remove()

    def remove_operand_raw(self, use: Use) -> None:
        """Drop ``use`` from the operand list without touching its value."""
        for index, existing in enumerate(self._operands):
            if existing is use:
                del self._operands[index]
                return

    def remove_use(self, use: Use) -> None:
        """Remove ``use`` entirely if it is one of this user's operands."""
        if any(existing is use for existing in self._operands):
            use.remove()

    def clear_operands(self) -> None:
        """Remove every operand edge."""
        while self._operands:
            self._operands[0].remove()


class Constant(User):
    """A value that cannot change at run time."""


class GlobalValue(Constant):
    """A module-level named entity such as a function or global variable."""

    def __init__(self, type: Type, name: str) -> None:
        super().__init__(type)
        self.name = name
        self.ir_name = IR_GLOBAL_VARNAME_PREFIX + name
        self.linkage = Linkage.EXTERNAL
        self.visibility = Visibility.DEFAULT
        self.alignment = 4

    def is_function(self) -> bool:
        """Whether this global is a function."""
        return False

    def is_global_variable(self) -> bool:
        """Whether this global is a variable."""
        return False