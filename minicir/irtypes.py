"""IR type system: void, label, integer, function and pointer types."""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterable


class TypeID(enum.Enum):
    """Kind of an IR type."""

    FLOAT = enum.auto()
    VOID = enum.auto()
    LABEL = enum.auto()
    TOKEN = enum.auto()
    INTEGER = enum.auto()
    FUNCTION = enum.auto()
    POINTER = enum.auto()
    ARRAY = enum.auto()


class Type(abc.ABC):
    """Base of every IR type. Types are compared by identity."""

    def __init__(self, type_id: TypeID = TypeID.VOID) -> None:
        self._type_id = type_id

    @property
    def type_id(self) -> TypeID:
        """The kind of this type."""
        return self._type_id

    def is_void_type(self) -> bool:
        return self._type_id is TypeID.VOID

    def is_label_type(self) -> bool:
        return self._type_id is TypeID.LABEL

    def is_function_type(self) -> bool:
        return self._type_id is TypeID.FUNCTION

    def is_integer_type(self) -> bool:
        return self._type_id is TypeID.INTEGER

    def is_float_type(self) -> bool:
        return self._type_id is TypeID.FLOAT

    def is_int1_byte(self) -> bool:
        """Whether this is the 1-bit boolean integer type."""
        return False

    def is_int32_type(self) -> bool:
        """Whether this is the 32-bit integer type."""
        return False

    def is_pointer_type(self) -> bool:
        return self._type_id is TypeID.POINTER

    def is_array_type(self) -> bool:
        return self._type_id is TypeID.ARRAY

    def size(self) -> int:
        """Size in bytes, or -1 when the type has no storage size."""
        return -1

    @abc.abstractmethod
    def __str__(self) -> str:
        """The IR spelling of the type."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class VoidType(Type):
    """The type with no value; a single instance exists."""

    _instance: VoidType | None = None

    def __init__(self) -> None:
        super().__init__(TypeID.VOID)

    @staticmethod
    def get() -> VoidType:
        """Return the shared void type."""
        if VoidType._instance is None:
            VoidType._instance = VoidType()
        return VoidType._instance

    def __str__(self) -> str:
        return "void"


class LabelType(Type):
    """The type of labels; a single instance exists."""

    _instance: LabelType | None = None

    def __init__(self) -> None:
        super().__init__(TypeID.LABEL)

    @staticmethod
    def get() -> LabelType:
        """Return the shared label type."""
        if LabelType._instance is None:
            LabelType._instance = LabelType()
        return LabelType._instance

    def __str__(self) -> str:
        return "void"


class IntegerType(Type):
    """An integer type of a given bit width."""

    _bool: IntegerType | None = None
    _int: IntegerType | None = None

    def __init__(self, bit_width: int) -> None:
        super().__init__(TypeID.INTEGER)
        self._bit_width = bit_width

    @property
    def bit_width(self) -> int:
        return self._bit_width

    @staticmethod
    def get_bool() -> IntegerType:
        """Return the shared 1-bit integer type."""
        if IntegerType._bool is None:
            IntegerType._bool = IntegerType(1)
        return IntegerType._bool

    @staticmethod
    def get_int() -> IntegerType:
        """Return the shared 32-bit integer type."""
        if IntegerType._int is None:
            IntegerType._int = IntegerType(32)
        return IntegerType._int

    def is_int1_byte(self) -> bool:
        return self._bit_width == 1

    def is_int32_type(self) -> bool:
        return self._bit_width == 32

    def size(self) -> int:
        return 4

    def __str__(self) -> str:
        return f"i{self._bit_width}"


class FunctionType(Type):
    """A function type made of a return type and parameter types."""

    def __init__(self, return_type: Type, arg_types: Iterable[Type]) -> None:
        super().__init__(TypeID.FUNCTION)
        self._return_type = return_type
        self._arg_types = tuple(arg_types)

    @property
    def return_type(self) -> Type:
        return self._return_type

    @property
    def arg_types(self) -> tuple[Type, ...]:
        return self._arg_types

    def __str__(self) -> str:
        args = ", ".join(str(t) for t in self._arg_types)
        return f"{self._return_type} (*)({args})"


class PointerType(Type):
    """A pointer to another type; ``get`` returns one shared instance per pointee."""

    _interned: dict[int, tuple[Type, PointerType]] = {}

    def __init__(self, pointee: Type) -> None:
        super().__init__(TypeID.POINTER)
        self._pointee = pointee
        if isinstance(pointee, PointerType):
            self._root = pointee.root_type
            self._depth = pointee.depth + 1
        else:
            self._root = pointee
            self._depth = 1

    @property
    def pointee_type(self) -> Type:
        """The type reached by one dereference."""
        return self._pointee

    @property
    def root_type(self) -> Type:
        """The non-pointer type reached by dereferencing all levels."""
        return self._root

    @property
    def depth(self) -> int:
        """Number of successive dereferences possible."""
        return self._depth

    @staticmethod
    def get(pointee: Type) -> PointerType:
        """Return the shared pointer type for ``pointee``."""
        entry = PointerType._interned.get(id(pointee))
        if entry is None or entry[0] is not pointee:
            entry = (pointee, PointerType(pointee))
            PointerType._interned[id(pointee)] = entry
        return entry[1]

    def __str__(self) -> str:
        return f"{self._pointee}*"