"""Concrete IR instructions: entry, exit, label, goto, arithmetic, move, call and arg."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from minicir.common import LogLevel, log
from minicir.core import GlobalValue, Value
from minicir.instruction import Instruction, IRInstOperator
from minicir.irtypes import Type, VoidType

if TYPE_CHECKING:
    from minicir.function import Function

_BINARY_KEYWORDS = {
    IRInstOperator.ADD_I: "add",
    IRInstOperator.SUB_I: "sub",
    IRInstOperator.MUL_I: "mul",
    IRInstOperator.DIV_I: "div",
    IRInstOperator.MOD_I: "mod",
}


class ArgInstruction(Instruction):
    """Passes one actual argument ahead of a function call."""

    def __init__(self, func: Function, src: Value) -> None:
        super().__init__(func, IRInstOperator.ARG, VoidType.get())
        self.add_operand(src)

    def to_ir(self) -> str:
        """The IR text; also counts this argument on the owning function."""
        src = self.operand(0)
        text = f"arg {src.ir_name}"
        address = src.memory_addr()
        if src.reg_id != -1:
            text += f" ; {src.reg_id}"
        elif address is not None:
            reg_id, offset = address
            text += f" ; {reg_id}[{offset}]"
        self.func.real_arg_count_inc()
        return text


class BinaryInstruction(Instruction):
    """A two-operand arithmetic instruction."""

    def __init__(
        self,
        func: Function | None,
        op: IRInstOperator,
        src1: Value,
        src2: Value,
        type: Type,
    ) -> None:
        super().__init__(func, op, type)
        self.add_operand(src1)
        self.add_operand(src2)

    def to_ir(self) -> str:
        keyword = _BINARY_KEYWORDS.get(self.op)
        if keyword is None:
            return super().to_ir()
        src1, src2 = self.operand(0), self.operand(1)
        return f"{self.ir_name} = {keyword} {src1.ir_name},{src2.ir_name}"


class EntryInstruction(Instruction):
    """Function entry: the prologue point."""

    def __init__(self, func: Function | None) -> None:
        super().__init__(func, IRInstOperator.ENTRY, VoidType.get())

    def to_ir(self) -> str:
        return "entry"


class ExitInstruction(Instruction):
    """Function exit, optionally carrying the returned value."""

    def __init__(self, func: Function | None, result: Value | None = None) -> None:
        super().__init__(func, IRInstOperator.EXIT, VoidType.get())
        if result is not None:
            self.add_operand(result)

    def to_ir(self) -> str:
        if self.operand_count == 0:
            return "exit void"
        return f"exit {self.operand(0).ir_name}"


class FuncCallInstruction(Instruction):
    """A call of another function with its actual arguments as operands."""

    def __init__(
        self,
        func: Function,
        called_function: GlobalValue,
        args: Iterable[Value],
        type: Type,
    ) -> None:
        super().__init__(func, IRInstOperator.FUNC_CALL, type)
        self.called_function = called_function
        self.name = called_function.name
        for arg in args:
            self.add_operand(arg)

    def to_ir(self) -> str:
        """The IR text; resets the owning function's argument counter."""
        arg_count = self.func.real_arg_count
        operand_count = self.operand_count
        if operand_count != arg_count and arg_count != 0:
            log(LogLevel.ERROR, "ARG instruction count does not match the call's argument count")

        callee = self.called_function.ir_name
        if self.type.is_void_type():
            text = f"call void {callee}("
        else:
            text = f"{self.ir_name} = call i32 {callee}("

        if arg_count == 0:
            text += ", ".join(f"{value.type} {value.ir_name}" for value in self.iter_operands())

        text += ")"
        self.func.real_arg_count_reset()
        return text

    def called_name(self) -> str:
        """Name of the called function."""
        return self.called_function.name


class LabelInstruction(Instruction):
    """A jump target."""

    def __init__(self, func: Function | None) -> None:
        super().__init__(func, IRInstOperator.LABEL, VoidType.get())

    def to_ir(self) -> str:
        return f"{self.ir_name}:"


class GotoInstruction(Instruction):
    """Unconditional branch to a label."""

    def __init__(self, func: Function | None, target: LabelInstruction) -> None:
        super().__init__(func, IRInstOperator.GOTO, VoidType.get())
        self._target = target

    @property
    def target(self) -> LabelInstruction:
        """The label jumped to."""
        return self._target

    def to_ir(self) -> str:
        return f"br label {self._target.ir_name}"


class MoveInstruction(Instruction):
    """Copies a source value into a destination value."""

    def __init__(self, func: Function | None, result: Value, src: Value) -> None:
        super().__init__(func, IRInstOperator.ASSIGN, VoidType.get())
        self.add_operand(result)
        self.add_operand(src)

    def to_ir(self) -> str:
        dst, src = self.operand(0), self.operand(1)
        return f"{dst.ir_name} = {src.ir_name}"