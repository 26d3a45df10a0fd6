# tests/test_variable.py

import pytest
from secure_variable import (
    ABSENT,
    CryptographicError,
    FormatError,
    MissingCredentialError,
    SecureVariable,
    SerializationError,
    UnknownAlgorithmError,
    import_variable,
)

TEST_1 = "test-1"
TEST_2 = "test-2"


class ComplexObject:
    def __init__(self, value=0):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, ComplexObject) and other.value == self.value

    @staticmethod
    def wrap(v):
        if isinstance(v, ComplexObject):
            return v
        return ComplexObject(v)


def test_create_and_read_plaintext():
    instance = SecureVariable(TEST_1)
    assert not instance.is_empty
    assert not instance.is_encrypted
    assert instance.get() == TEST_1
    assert instance.raw_data == b'\x00"test-1"'


def test_create_and_read_encrypted():
    instance = SecureVariable(TEST_1, TEST_2)
    assert not instance.is_empty
    assert instance.is_encrypted
    assert instance.get(TEST_2) == TEST_1


def test_encrypted_value_is_not_visible():
    detail = SecureVariable(TEST_1, TEST_2).read(TEST_2)

    assert detail.header.encrypted is True
    assert detail.encrypted is not None
    assert detail.encoded != detail.encrypted
    assert detail.encoded == b'"test-1"'
    assert detail.decoded == TEST_1
    assert b"test-1" not in SecureVariable(TEST_1, TEST_2).raw_data


def test_plaintext_detail_has_no_ciphertext():
    detail = SecureVariable({"a": 1}).read()
    assert detail.header.encrypted is False
    assert detail.encrypted is None
    assert detail.encoded == b'{"a":1}'


def test_empty_password_stores_plaintext():
    instance = SecureVariable(TEST_1, "")
    assert not instance.is_encrypted
    assert instance.get() == TEST_1


def test_missing_password():
    instance = SecureVariable(TEST_1, TEST_2)
    for password in (None, ""):
        with pytest.raises(MissingCredentialError):
            instance.read(password)


def test_wrong_password_does_not_return_value():
    instance = SecureVariable(TEST_1, TEST_2)
    with pytest.raises((CryptographicError, SerializationError)):
        instance.get("not-the-password")


def test_bytes_passwords_encrypt():
    for password in (b"pw", bytearray(b"pw")):
        instance = SecureVariable("secret", password)
        assert instance.is_encrypted
        assert b"secret" not in instance.raw_data
        assert instance.get(password) == "secret"
    assert SecureVariable("secret", bytearray(b"pw")).get("pw") == "secret"


@pytest.mark.parametrize("password", [123, ["pw"], object()])
def test_unsupported_password_type(password):
    with pytest.raises(TypeError):
        SecureVariable("secret", password)
    with pytest.raises(TypeError):
        SecureVariable("secret", "pw").read(password)


def test_empty_container():
    instance = SecureVariable(b"")
    assert instance.is_empty
    assert not instance.is_encrypted
    with pytest.raises(FormatError):
        instance.read()
    with pytest.raises(FormatError):
        instance.get("pw")


def test_set_replaces_buffer_and_chains():
    instance = SecureVariable(b"")
    assert instance.set(TEST_1, TEST_2) is instance
    assert instance.is_encrypted

    instance.set({"n": 2})
    assert not instance.is_encrypted
    assert instance.get() == {"n": 2}


@pytest.mark.parametrize("password", [None, TEST_2])
def test_export_import(password):
    instance1 = SecureVariable(TEST_1, password)
    instance2 = SecureVariable.from_bytes(instance1.to_bytes(), instance1.algorithm)
    assert instance2.is_encrypted == instance1.is_encrypted
    assert instance2.get(password) == instance1.get(password)


def test_import_with_other_algorithm():
    instance1 = SecureVariable([1, 2, 3], TEST_2, algorithm="camellia-128-cbc")
    instance2 = import_variable(instance1.to_bytes(), "camellia-128-cbc")
    assert instance2.algorithm == "camellia-128-cbc"
    assert instance2.get(TEST_2) == [1, 2, 3]
    assert SecureVariable(bytearray(instance1.to_bytes()), algorithm="camellia-128-cbc").get(TEST_2) == [1, 2, 3]


def test_import_is_lazy():
    instance = import_variable(b"\x01short")
    assert instance.is_encrypted
    with pytest.raises(CryptographicError):
        instance.get("pw")

    garbage = import_variable(b"\x00{broken")
    with pytest.raises(SerializationError):
        garbage.get()


def test_unknown_algorithm_fails_fast():
    with pytest.raises(UnknownAlgorithmError):
        SecureVariable(TEST_1, TEST_2, algorithm="rot13")
    with pytest.raises(UnknownAlgorithmError):
        import_variable(b"\x00null", "rot13")


def test_base64_transport():
    instance = SecureVariable({"k": "v"}, TEST_2)
    restored = SecureVariable.from_base64(instance.to_base64())
    assert restored.get(TEST_2) == {"k": "v"}

    with pytest.raises(FormatError):
        SecureVariable.from_base64("***")


def test_transform_roundtrip():
    passwd = "TEST-1"
    complex1 = ComplexObject(100)
    instance = SecureVariable(complex1, passwd, lambda v: v.value)

    detail = instance.read(passwd, ComplexObject.wrap)
    assert detail.encoded == b"100"
    assert isinstance(detail.decoded, ComplexObject)
    assert detail.decoded == complex1


def test_absent_value():
    instance = SecureVariable(ABSENT, "test")
    assert instance.get("test") is ABSENT
    assert SecureVariable(ABSENT).get() is ABSENT
    assert SecureVariable(ABSENT).raw_data == b"\x00"


def test_none_value():
    assert SecureVariable(None, "test").get("test") is None
    assert SecureVariable(None).get() is None


def test_nested_objects():
    value = {
        "value1": "test1",
        "value2": "test2",
        "options": {"value1": "test3", "value2": "test4"},
    }
    assert SecureVariable(value, "test").get("test") == value


def test_unserializable_value():
    with pytest.raises(SerializationError):
        SecureVariable({1, 2}, "test")


def test_header_other_than_one_reads_as_plaintext():
    assert import_variable(b"\x02\"x\"").get() == "x"


def test_detail_to_dict_and_repr():
    instance = SecureVariable(TEST_1, TEST_2)
    d = instance.read(TEST_2).to_dict()
    assert d["header"] == {"encrypted": True}
    assert d["decoded"] == TEST_1
    assert isinstance(d["encrypted"], str) and isinstance(d["encoded"], str)

    text = repr(instance)
    assert "aes-256-cbc" in text and "encrypted=True" in text
    assert TEST_1 not in text
