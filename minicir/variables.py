"""Concrete IR values: integer constants, parameters and the kinds of variables."""

from __future__ import annotations

from minicir.core import Constant, GlobalValue, Value
from minicir.irtypes import IntegerType, Type


class _LoadRegister:
    """Adds a settable register number used when loading the value."""

    _load_reg = -1

    @property
    def load_reg_id(self) -> int:
        """Register used to load this value, or -1 when none."""
        return self._load_reg

    @load_reg_id.setter
    def load_reg_id(self, reg_id: int) -> None:
        self._load_reg = reg_id


class ConstInt(_LoadRegister, Constant):
    """A 32-bit integer constant; its IR name is its decimal value."""

    def __init__(self, value: int) -> None:
        super().__init__(IntegerType.get_int())
        self.name = str(value)
        self._value = value

    @property
    def value(self) -> int:
        """The integer value."""
        return self._value

    @property
    def ir_name(self) -> str:
        return self.name

    @ir_name.setter
    def ir_name(self, _name: str) -> None:
        # A constant is always spelled by its value.
        pass


class FormalParam(_LoadRegister, Value):
    """A formal parameter of a function."""

    def __init__(self, type: Type, name: str = "") -> None:
        super().__init__(type, name)
        self._reg_id = -1
        self._base_reg = -1
        self._offset = 0

    @property
    def reg_id(self) -> int:
        return self._reg_id

    @reg_id.setter
    def reg_id(self, reg_id: int) -> None:
        self._reg_id = reg_id

    def memory_addr(self) -> tuple[int, int] | None:
        """Base register and offset when stack-addressed, otherwise None."""
        if self._base_reg == -1:
            return None
        return self._base_reg, self._offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the parameter at ``offset`` from base register ``reg_id``."""
        self._base_reg = reg_id
        self._offset = offset


class GlobalVariable(_LoadRegister, GlobalValue):
    """A module-level variable, addressed by its symbol name."""

    def __init__(self, type: Type, name: str) -> None:
        super().__init__(type, name)
        self.alignment = 4
        self._in_bss_section = True

    def is_global_variable(self) -> bool:
        return True

    @property
    def in_bss_section(self) -> bool:
        """Whether the variable is uninitialised or zero-initialised."""
        return self._in_bss_section

    @property
    def scope_level(self) -> int:
        return 0

    def to_declare_string(self) -> str:
        """The IR declare line for this variable."""
        return f"declare {self.type} {self.ir_name}"


class LocalVariable(_LoadRegister, Value):
    """A variable local to a function, living at a given scope level."""

    def __init__(self, type: Type, name: str = "", scope_level: int = 1) -> None:
        super().__init__(type, name)
        self._scope_level = scope_level
        self._reg_id = -1
        self._base_reg = -1
        self._offset = 0

    @property
    def scope_level(self) -> int:
        return self._scope_level

    @property
    def reg_id(self) -> int:
        return self._reg_id

    @reg_id.setter
    def reg_id(self, reg_id: int) -> None:
        self._reg_id = reg_id

    def memory_addr(self) -> tuple[int, int] | None:
        """Base register and offset when stack-addressed, otherwise None."""
        if self._base_reg == -1:
            return None
        return self._base_reg, self._offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the variable at ``offset`` from base register ``reg_id``."""
        self._base_reg = reg_id
        self._offset = offset


class MemVariable(_LoadRegister, Value):
    """A value that always lives in memory."""

    def __init__(self, type: Type) -> None:
        super().__init__(type)
        self._base_reg = -1
        self._offset = 0

    def memory_addr(self) -> tuple[int, int]:
        """Base register and offset; always present for memory values."""
        return self._base_reg, self._offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the value at ``offset`` from base register ``reg_id``."""
        self._base_reg = reg_id
        self._offset = offset


class RegVariable(Value):
    """A value bound to a physical register; its IR name is the register name."""

    def __init__(self, type: Type, name: str, reg_no: int) -> None:
        super().__init__(type, name)
        self._reg_no = reg_no

    @property
    def reg_id(self) -> int:
        return self._reg_no

    @property
    def ir_name(self) -> str:
        return self.name

    @ir_name.setter
    def ir_name(self, _name: str) -> None:
        # The register name is fixed.
        pass