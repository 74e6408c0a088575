from dataclasses import dataclass, field

import pytest

from kitbag.params import ParamError, unpack


@dataclass
class Search:
    labels: list[str] = field(default_factory=list, metadata={"http": "l"})
    max_results: int = field(default=10, metadata={"http": "max"})
    exact: bool = field(default=False, metadata={"http": "x"})


@dataclass
class Plain:
    Name: str = ""
    Ratio: float = 0.0


def test_defaults_kept():
    data = unpack("", Search())
    assert data == Search()


def test_labels_collected():
    data = unpack("l=python&l=programming", Search())
    assert data.labels == ["python", "programming"]
    assert data.max_results == 10
    assert data.exact is False


def test_max_results():
    data = unpack("l=python&l=programming&max=100", Search())
    assert data.max_results == 100
    assert data.labels == ["python", "programming"]


def test_exact_flag():
    data = unpack("x=true&l=python&l=programming", Search())
    assert data.exact is True


def test_bad_bool():
    with pytest.raises(ParamError) as info:
        unpack("q=hello&x=123", Search())
    assert str(info.value) == 'x: strconv.ParseBool: parsing "123": invalid syntax'


def test_bad_int():
    with pytest.raises(ParamError) as info:
        unpack("q=hello&max=lots", Search())
    assert str(info.value) == 'max: strconv.ParseInt: parsing "lots": invalid syntax'


def test_mapping_form_and_lowercase_name():
    data = unpack({"name": "joe", "unknown": ["ignored"]}, Plain())
    assert data.Name == "joe"


def test_unsupported_kind():
    with pytest.raises(ParamError, match="unsupported kind float"):
        unpack({"ratio": ["0.5"]}, Plain())


def test_invalid_escape():
    with pytest.raises(ParamError, match="invalid URL escape"):
        unpack("l=%zz", Search())


def test_escapes_decoded():
    data = unpack("l=a+b%21", Search())
    assert data.labels == ["a b!"]


def test_not_a_dataclass():
    with pytest.raises(TypeError):
        unpack("l=a", object())