import pytest

from minicir.function import Function
from minicir.instructions import EntryInstruction, ExitInstruction
from minicir.irtypes import IntegerType, VoidType
from minicir.module import Module, SymbolError
from minicir.variables import ConstInt, GlobalVariable, LocalVariable


@pytest.fixture
def module():
    return Module("test.c")


@pytest.fixture
def int_type():
    return IntegerType.get_int()


def test_name(module):
    assert module.name == "test.c"


def test_builtin_functions_registered(module, int_type):
    putint = module.find_function("putint")
    getint = module.find_function("getint")
    assert putint.builtin and getint.builtin
    assert len(putint.params) == 1
    assert putint.return_type is VoidType.get()
    assert getint.return_type is int_type
    assert module.functions == [putint, getint]


def test_new_function_and_find(module, int_type):
    func = module.new_function("main", int_type)
    assert isinstance(func, Function)
    assert module.find_function("main") is func
    assert module.functions[-1] is func
    assert func.type.return_type is int_type
    assert module.find_function("missing") is None


def test_duplicate_function_raises(module, int_type):
    module.new_function("main", int_type)
    with pytest.raises(SymbolError):
        module.new_function("main", int_type)
    with pytest.raises(SymbolError):
        module.new_function("putint", int_type)


def test_const_ints_are_shared(module):
    assert module.find_const_int(7) is None
    a = module.new_const_int(7)
    assert isinstance(a, ConstInt)
    assert module.new_const_int(7) is a
    assert module.find_const_int(7) is a
    assert a.value == 7


def test_global_variable_outside_function(module, int_type):
    var = module.new_var_value(int_type, "g")
    assert isinstance(var, GlobalVariable)
    assert module.global_variables == [var]
    assert module.find_global_variable("g") is var
    assert module.find_var_value("g") is var


def test_duplicate_variable_in_same_scope_raises(module, int_type):
    module.new_var_value(int_type, "g")
    with pytest.raises(SymbolError):
        module.new_var_value(int_type, "g")


def test_unnamed_global_raises(module, int_type):
    with pytest.raises(SymbolError):
        module.new_var_value(int_type)


def test_local_variables_and_shadowing(module, int_type):
    outer = module.new_var_value(int_type, "a")
    func = module.new_function("main", int_type)
    module.current_function = func
    module.enter_scope()
    inner = module.new_var_value(int_type, "a")
    assert isinstance(inner, LocalVariable)
    assert inner.scope_level == 1
    assert module.find_var_value("a") is inner
    module.enter_scope()
    deeper = module.new_var_value(int_type, "b")
    assert deeper.scope_level == 2
    module.leave_scope()
    assert module.find_var_value("b") is None
    module.leave_scope()
    assert module.find_var_value("a") is outer
    assert func.local_variables == [inner, deeper]


def test_unnamed_local_gets_level_one(module, int_type):
    func = module.new_function("main", int_type)
    module.current_function = func
    module.enter_scope()
    module.enter_scope()
    tmp = module.new_var_value(int_type)
    assert tmp.scope_level == 1
    assert tmp in func.local_variables


def build_program(module, int_type):
    module.new_var_value(int_type, "g")
    func = module.new_function("main", VoidType.get())
    func.code.add_inst(EntryInstruction(func))
    func.code.add_inst(ExitInstruction(func))
    return func


def test_module_ir_text(module, int_type):
    build_program(module, int_type)
    module.rename_ir()
    assert module.to_ir() == "declare i32 @g\ndefine void @main()\n{\n\tentry\n\texit void\n}\n"


def test_output_ir_matches_text(module, int_type, tmp_path):
    build_program(module, int_type)
    module.rename_ir()
    path = tmp_path / "out.ir"
    module.output_ir(path)
    assert path.read_text(encoding="utf-8") == module.to_ir()


def test_rename_ir_reaches_functions(module, int_type):
    func = module.new_function("main", int_type)
    var = func.new_local_var(int_type, "x", 1)
    module.rename_ir()
    assert var.ir_name.startswith("%l")


def test_delete_clears_everything(module, int_type):
    func = build_program(module, int_type)
    module.delete()
    assert module.functions == []
    assert module.global_variables == []
    assert module.find_function("main") is None
    assert module.find_global_variable("g") is None
    assert len(func.code) == 0
    assert module.to_ir() == ""