# minicir

`minicir` is the middle layer of a compiler for a small C-like language. It provides
a linear intermediate representation (IR) with types, values, def-use edges and
instructions. It also has a scoped symbol table and a module object that writes the
IR out as text.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `minicir.irtypes`: the IR types. `VoidType.get()` and `LabelType.get()` return
  shared instances. `IntegerType.get_int()` returns the shared `i32` type and
  `IntegerType.get_bool()` the shared `i1` type. There is also `FunctionType(return_type,
  arg_types)`. `PointerType.get(pointee)` returns one shared pointer type per pointee
  and exposes `pointee_type`, `root_type` and `depth`.
- `minicir.core`: `Value`, `Use`, `User`, `Constant` and `GlobalValue`. Together they
  form the def-use graph. A `User` keeps its operand edges. Each `Value` keeps the
  edges that use it. Methods such as `add_operand`, `set_operand`, `remove_operand`
  and `clear_operands` keep both sides in step. The module also defines the IR name
  prefixes (`@`, `%l`, `%t`, `%m`, `.L`).
- `minicir.variables`: `ConstInt`, `FormalParam`, `GlobalVariable`, `LocalVariable`,
  `MemVariable` and `RegVariable`. A `ConstInt` always uses its decimal value as its IR
  name. `GlobalVariable.to_declare_string()` gives its `declare` line.
- `minicir.instruction`: the `Instruction` base class, the `IRInstOperator` opcodes
  (`ENTRY`, `EXIT`, `LABEL`, `GOTO`, `ADD_I`, `SUB_I`, `MUL_I`, `DIV_I`, `MOD_I`,
  `ASSIGN`, `FUNC_CALL`, `ARG`) and `InterCode`, an ordered instruction list.
  `InterCode.extend(block)` moves the instructions of `block` to the end and leaves
  `block` empty.
- `minicir.instructions`: the concrete instructions `EntryInstruction`,
  `ExitInstruction`, `LabelInstruction`, `GotoInstruction`, `BinaryInstruction`,
  `MoveInstruction`, `FuncCallInstruction` and `ArgInstruction`. Each of them prints
  itself with `to_ir()`. `ArgInstruction.to_ir()` adds one to the owning function's
  `real_arg_count`. `FuncCallInstruction.to_ir()` resets that count. A call lists its
  arguments inline only when no ARG instructions were counted before it.
- `minicir.scopes`: `ScopeStack`, the nested name-to-value scopes. Level 0 is the
  outermost scope.
- `minicir.function`: `Function`. It holds `params`, `local_variables`, `code`,
  `exit_label`, `return_value` and stack-frame data. `rename_ir()` gives IR names to
  parameters, locals, labels and result-producing instructions. `to_ir()` prints the
  function. A built-in function prints as an empty string.
- `minicir.module`: `Module`, the symbol table for one source file. It starts with
  the built-in functions `putint` and `getint`. `new_var_value` creates a local
  variable while `current_function` is set, and a global variable otherwise.
  `new_const_int` returns one shared constant per value. Redefining a function or a
  variable in the same scope raises `SymbolError`. So does asking for an unnamed
  global. `to_ir()` returns the whole module as text and `output_ir(path)` writes it
  to a file.
- `minicir.indexset`: `IndexSet`, a set of non-negative indices. It supports `&`, `|`,
  `-`, `^` and a complement `~`, which is bounded by its `count`.
- `minicir.bitmap`: `BitMap`, a bit map of fixed capacity.
- `minicir.common`: character-class checks, `trim`, number formatting and a `log`
  helper. `log` writes errors to standard output and everything else to standard
  error.

## Example

```python
from minicir.module import Module
from minicir.irtypes import IntegerType
from minicir.instruction import IRInstOperator
from minicir.instructions import (
    EntryInstruction, LabelInstruction, ExitInstruction,
    BinaryInstruction, MoveInstruction, GotoInstruction,
)

module = Module("demo.c")
int_type = IntegerType.get_int()

main = module.new_function("main", int_type)
module.current_function = main
module.enter_scope()

code = main.code
code.add_inst(EntryInstruction(main))
exit_label = LabelInstruction(main)
main.exit_label = exit_label
ret = module.new_var_value(int_type)
main.return_value = ret

a = module.new_var_value(int_type, "a")
add = BinaryInstruction(main, IRInstOperator.ADD_I,
                        module.new_const_int(1), module.new_const_int(2), int_type)
code.add_inst(add)
code.add_inst(MoveInstruction(main, a, add))
code.add_inst(MoveInstruction(main, ret, a))
code.add_inst(GotoInstruction(main, exit_label))
code.add_inst(exit_label)
code.add_inst(ExitInstruction(main, ret))

module.current_function = None
module.leave_scope()

module.rename_ir()
print(module.to_ir())
module.output_ir("demo.ir")
```

In the printed IR, `@` marks global names and `%l` marks local variables. `%t` marks
temporaries and parameters, and `.L` marks labels.

## What it does not do

The package is a library only and has no command-line program. It cannot read
source text. There is no lexer, parser or syntax tree, and nothing turns source
programs into IR on its own. The caller has to build the instructions, as in the
example above. The package does not generate assembly for any target machine, does
not allocate registers and does not optimise the IR.