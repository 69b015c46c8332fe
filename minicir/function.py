"""IR functions: parameters, local variables, instruction code and frame data."""

from __future__ import annotations

from minicir.core import (
    IR_LABEL_PREFIX,
    IR_LOCAL_VARNAME_PREFIX,
    IR_TEMP_VARNAME_PREFIX,
    GlobalValue,
)
from minicir.instruction import Instruction, InterCode, IRInstOperator
from minicir.irtypes import FunctionType, Type
from minicir.variables import FormalParam, LocalVariable, MemVariable


class Function(GlobalValue):
    """A function: a global value of function type that owns its IR code."""

    def __init__(self, name: str, type: FunctionType, builtin: bool = False) -> None:
        super().__init__(type, name)
        self.return_type: Type = type.return_type
        self.params: list[FormalParam] = []
        self.builtin = builtin
        self.code = InterCode()
        self.local_variables: list[LocalVariable] = []
        self.mem_variables: list[MemVariable] = []
        self.exit_label: Instruction | None = None
        self.return_value: LocalVariable | None = None
        self.max_func_call_arg_count = 0
        self.exist_func_call = False
        self.protected_regs: list[int] = []
        self.protected_reg_str = ""
        self.real_arg_count = 0
        self._max_depth = 0
        self._relocated = False
        self.alignment = 1

    def is_function(self) -> bool:
        return True

    @property
    def max_depth(self) -> int:
        """Stack frame depth needed for locals and spilled parameters."""
        return self._max_depth

    @property
    def relocated(self) -> bool:
        """Whether the stack frame depth has been set."""
        return self._relocated

    def set_max_depth(self, depth: int) -> None:
        """Set the stack frame depth and mark the frame as relocated."""
        self._max_depth = depth
        self._relocated = True

    def new_local_var(self, type: Type, name: str = "", scope_level: int = 1) -> LocalVariable:
        """Create a local variable owned by this function; names may repeat."""
        var = LocalVariable(type, name, scope_level)
        self.local_variables.append(var)
        return var

    def new_mem_variable(self, type: Type) -> MemVariable:
        """Create a memory-resident value owned by this function."""
        mem = MemVariable(type)
        self.mem_variables.append(mem)
        return mem

    def delete(self) -> None:
        """Drop all instructions and local variables."""
        self.code.delete()
        self.local_variables.clear()

    def rename_ir(self) -> None:
        """Give IR names to parameters, locals, labels and result-producing instructions."""
        if self.builtin:
            return
        index = 0
        for param in self.params:
            param.ir_name = f"{IR_TEMP_VARNAME_PREFIX}{index}"
            index += 1
        for var in self.local_variables:
            var.ir_name = f"{IR_LOCAL_VARNAME_PREFIX}{index}"
            index += 1
        for inst in self.code:
            if inst.op is IRInstOperator.LABEL:
                inst.ir_name = f"{IR_LABEL_PREFIX}{index}"
                index += 1
            elif inst.has_result_value():
                inst.ir_name = f"{IR_TEMP_VARNAME_PREFIX}{index}"
                index += 1

    def real_arg_count_inc(self) -> None:
        """Count one more ARG instruction."""
        self.real_arg_count += 1

    def real_arg_count_reset(self) -> None:
        """Reset the ARG instruction counter."""
        self.real_arg_count = 0

    def to_ir(self) -> str:
        """The IR text of the function; empty for built-in functions."""
        if self.builtin:
            return ""
        params = ", ".join(f"{param.type}{param.ir_name}" for param in self.params)
        lines = [f"define {self.return_type} {self.ir_name}({params})", "{"]

        for var in self.local_variables:
            line = f"\tdeclare {var.type} {var.ir_name}"
            if var.name:
                line += f" ; {var.scope_level}:{var.name}"
            lines.append(line)

        lines.extend(
            f"\tdeclare {inst.type} {inst.ir_name}" for inst in self.code if inst.has_result_value()
        )

        for inst in self.code:
            text = inst.to_ir()
            if not text:
                continue
            lines.append(text if inst.op is IRInstOperator.LABEL else f"\t{text}")

        lines.append("}")
        return "\n".join(lines) + "\n"