"""
neofont.base.struct - big-endian binary structures

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import ctypes
from types import SimpleNamespace


class StructError(ValueError):
    pass


##############################################################################
# field types

# all multi-byte fields in the applet are big-endian
TYPES = {
    'uint8': ctypes.c_uint8,
    'uint16': ctypes.c_uint16.__ctype_be__,
    'uint32': ctypes.c_uint32.__ctype_be__,
}


def _parse_type(atype):
    """Convert field type to a ctypes type; '<n>s' is an n-byte char field."""
    if isinstance(atype, _WrappedCType):
        return atype._ctype
    if atype in TYPES:
        return TYPES[atype]
    if isinstance(atype, str) and atype.endswith('s'):
        return ctypes.c_char * int(atype[:-1])
    raise ValueError(f'Field type `{atype}` not understood')


##############################################################################
# wrappers

class _WrappedCValue:
    """Wrapper for ctypes value."""

    @classmethod
    def from_cvalue(cls, cvalue, type):
        obj = cls()
        obj._cvalue = cvalue
        obj._type = type
        return obj

    def __bytes__(self):
        return bytes(self._cvalue)


class _WrappedCType:
    """Wrapper for ctypes type, factory for _WrappedCValue objects."""

    def __mul__(self, count):
        """Create an array."""
        return ArrayType(self, count)

    __rmul__ = __mul__

    def __call__(self, *args, **kwargs):
        """Instantiate a value."""
        # pylint: disable=no-member
        return self.from_cvalue(self._ctype(*args, **kwargs))

    def from_cvalue(self, cvalue):
        # pylint: disable=no-member
        return self._value_cls.from_cvalue(cvalue, self)

    def from_bytes(self, data, offset=0):
        """Read a value from a buffer, starting at `offset`."""
        # pylint: disable=no-member
        if offset < 0:
            raise StructError(f'Negative offset {offset}')
        try:
            cvalue = self._ctype.from_buffer_copy(bytes(data), offset)
        except ValueError as e:
            raise StructError(e) from e
        return self.from_cvalue(cvalue)

    @property
    def size(self):
        # pylint: disable=no-member
        return ctypes.sizeof(self._ctype)


class ScalarValue(_WrappedCValue):

    def __repr__(self):
        return f'{type(self).__name__}({self._cvalue.value})'

    def __int__(self):
        return self._cvalue.value


class ScalarType(_WrappedCType):
    """Scalar field type, used to build arrays and the trailer word."""

    _value_cls = ScalarValue

    def __init__(self, name):
        self._ctype = TYPES[name]


class StructValue(_WrappedCValue):
    """Structure value with attribute access to its fields."""

    def __getattr__(self, attr):
        if attr.startswith('_'):
            raise AttributeError(attr)
        value = getattr(self._cvalue, attr)
        if isinstance(value, ctypes.Array):
            return self._type.fields[attr].from_cvalue(value)
        return value

    def __setattr__(self, attr, value):
        if attr.startswith('_'):
            return super().__setattr__(attr, value)
        return setattr(self._cvalue, attr, value)

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__,
            ', '.join(
                f'{_field}={getattr(self, _field)}'
                for _field, *_ in self._cvalue._fields_
            )
        )


class StructType(_WrappedCType):
    """
    Big-endian structure of named fields, packed without alignment.

    info = StructType(height='uint8', offset='uint16')
    assert bytes(info(height=1, offset=2)) == b'\1\0\2'
    assert info.from_bytes(b'\1\0\2').offset == 2
    """

    _value_cls = StructValue

    def __init__(self, **fields):

        class _CStruct(ctypes.BigEndianStructure):
            _fields_ = tuple(
                (_field, _parse_type(_type))
                for _field, _type in fields.items()
            )
            _pack_ = True

        self._ctype = _CStruct
        self.fields = fields

    def offset_of(self, field):
        """Byte offset of a named field from the start of the structure."""
        return getattr(self._ctype, field).offset


class ArrayValue(_WrappedCValue):
    """Array of scalars."""

    def __getitem__(self, item):
        return self._cvalue[item]

    def __iter__(self):
        return iter(self._cvalue)

    def __len__(self):
        return len(self._cvalue)

    def __repr__(self):
        return '{}({})'.format(
            type(self).__name__, ', '.join(str(_s) for _s in self)
        )


class ArrayType(_WrappedCType):
    """Fixed-length array of a scalar type."""

    _value_cls = ArrayValue

    def __init__(self, element_type, count):
        self.element_type = element_type
        self._ctype = element_type._ctype * count


big_endian = SimpleNamespace(
    Struct=StructType,
    uint8=ScalarType('uint8'),
    uint16=ScalarType('uint16'),
    uint32=ScalarType('uint32'),
)
