"""Module symbol table: functions, global variables, constants and scopes."""

from __future__ import annotations

import os

from minicir.core import Value
from minicir.function import Function
from minicir.irtypes import FunctionType, IntegerType, Type, VoidType
from minicir.scopes import ScopeStack
from minicir.variables import ConstInt, FormalParam, GlobalVariable


class SymbolError(Exception):
    """A symbol is redefined or cannot be created."""


class Module:
    """One compiled source file: its functions, globals and scope stack."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._scopes = ScopeStack()
        self._scopes.enter_scope()
        self.current_function: Function | None = None
        self._functions: dict[str, Function] = {}
        self._function_list: list[Function] = []
        self._globals: dict[str, GlobalVariable] = {}
        self._global_list: list[GlobalVariable] = []
        self._const_ints: dict[int, ConstInt] = {}

        int_type = IntegerType.get_int()
        self.new_function("putint", VoidType.get(), [FormalParam(int_type, "")], True)
        self.new_function("getint", int_type, [], True)

    @property
    def name(self) -> str:
        """The module name, that is the source file name."""
        return self._name

    @property
    def functions(self) -> list[Function]:
        """Functions in definition order."""
        return self._function_list

    @property
    def global_variables(self) -> list[GlobalVariable]:
        """Global variables in definition order."""
        return self._global_list

    def enter_scope(self) -> None:
        """Enter a nested scope such as a function body or block."""
        self._scopes.enter_scope()

    def leave_scope(self) -> None:
        """Leave the innermost scope."""
        self._scopes.leave_scope()

    def new_function(
        self,
        name: str,
        return_type: Type,
        params: list[FormalParam] | None = None,
        builtin: bool = False,
    ) -> Function:
        """Create and register a function; raises SymbolError if the name is taken."""
        if self.find_function(name) is not None:
            raise SymbolError(f"function ({name}) already exists")
        params = list(params or [])
        func_type = FunctionType(return_type, [param.type for param in params])
        func = Function(name, func_type, builtin)
        func.params.extend(params)
        self._functions[func.name] = func
        self._function_list.append(func)
        return func

    def find_function(self, name: str) -> Function | None:
        """Return the function called ``name``, or None."""
        return self._functions.get(name)

    def new_const_int(self, value: int) -> ConstInt:
        """Return the shared integer constant for ``value``, creating it if needed."""
        const = self.find_const_int(value)
        if const is None:
            const = ConstInt(value)
            self._const_ints[value] = const
        return const

    def find_const_int(self, value: int) -> ConstInt | None:
        """Return the integer constant for ``value`` if it exists."""
        return self._const_ints.get(value)

    def new_var_value(self, type: Type, name: str = "") -> Value:
        """Create a local variable inside a function, or a global one outside.

        Raises SymbolError when ``name`` already exists in the current scope, or
        when an unnamed variable is requested outside any function.
        """
        if name:
            if self._scopes.find_current_scope(name) is not None:
                raise SymbolError(f"variable ({name}) already exists")
        elif self.current_function is None:
            raise SymbolError("global variable name is empty")

        value: Value
        if self.current_function is not None:
            level = self._scopes.current_level() if name else 1
            value = self.current_function.new_local_var(type, name, level)
        else:
            value = self.new_global_variable(type, name)

        self._scopes.insert_value(value)
        return value

    def find_var_value(self, name: str) -> Value | None:
        """Look a variable up from the innermost scope outwards."""
        return self._scopes.find_all_scopes(name)

    def new_global_variable(self, type: Type, name: str) -> GlobalVariable:
        """Create and register a global variable without checking for duplicates."""
        var = GlobalVariable(type, name)
        self._globals.setdefault(var.name, var)
        self._global_list.append(var)
        return var

    def find_global_variable(self, name: str) -> GlobalVariable | None:
        """Return the global variable called ``name``, or None."""
        return self._globals.get(name)

    def delete(self) -> None:
        """Release all functions and global variables."""
        for func in self._function_list:
            func.delete()
        self._globals.clear()
        self._global_list.clear()
        self._functions.clear()
        self._function_list.clear()

    def rename_ir(self) -> None:
        """Give IR names to every unnamed value in every function."""
        for func in self._function_list:
            func.rename_ir()

    def to_ir(self) -> str:
        """The IR text of the whole module."""
        parts = [f"{var.to_declare_string()}\n" for var in self._global_list]
        parts.extend(func.to_ir() for func in self._function_list)
        return "".join(parts)

    def output_ir(self, path: str | os.PathLike[str]) -> None:
        """Write the module's IR text to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.to_ir())