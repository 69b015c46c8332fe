"""IR instruction base class and instruction sequences."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import TYPE_CHECKING

from minicir.core import User
from minicir.irtypes import Type

if TYPE_CHECKING:
    from minicir.function import Function


class IRInstOperator(enum.Enum):
    """Operation code of an IR instruction."""

    ENTRY = enum.auto()
    EXIT = enum.auto()
    LABEL = enum.auto()
    GOTO = enum.auto()
    ADD_I = enum.auto()
    SUB_I = enum.auto()
    MUL_I = enum.auto()
    DIV_I = enum.auto()
    MOD_I = enum.auto()
    ASSIGN = enum.auto()
    FUNC_CALL = enum.auto()
    ARG = enum.auto()
    MAX = enum.auto()


class Instruction(User):
    """Base of every IR instruction; an instruction is also its result value."""

    def __init__(self, func: Function | None, op: IRInstOperator, type: Type) -> None:
        super().__init__(type)
        self.op = op
        self.func = func
        self.dead = False
        self._reg_id = -1
        self._base_reg = -1
        self._offset = 0
        self._load_reg = -1

    def to_ir(self) -> str:
        """The IR text of the instruction."""
        return "Unkown IR Instruction"

    def has_result_value(self) -> bool:
        """Whether the instruction produces a value."""
        return not self.type.is_void_type()

    @property
    def reg_id(self) -> int:
        return self._reg_id

    def memory_addr(self) -> tuple[int, int] | None:
        """Base register and offset when stack-addressed, otherwise None."""
        if self._base_reg == -1:
            return None
        return self._base_reg, self._offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the result at ``offset`` from base register ``reg_id``."""
        self._base_reg = reg_id
        self._offset = offset

    @property
    def load_reg_id(self) -> int:
        return self._load_reg

    @load_reg_id.setter
    def load_reg_id(self, reg_id: int) -> None:
        self._load_reg = reg_id


class InterCode:
    """An ordered sequence of IR instructions."""

    def __init__(self) -> None:
        self._code: list[Instruction] = []

    @property
    def instructions(self) -> list[Instruction]:
        """The instruction list itself."""
        return self._code

    def add_inst(self, inst: Instruction) -> None:
        """Append one instruction."""
        self._code.append(inst)

    def extend(self, block: InterCode) -> None:
        """Move every instruction of ``block`` to the end; ``block`` is left empty."""
        self._code.extend(block._code)
        block._code.clear()

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self._code)

    def __len__(self) -> int:
        return len(self._code)

    def delete(self) -> None:
        """Detach every instruction's operands and drop all instructions."""
        for inst in self._code:
            inst.clear_operands()
        self._code.clear()