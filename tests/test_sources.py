from noname.sources import Sources


def test_builtin_entry_present():
    sources = Sources()
    assert sources.get(0) == ("<BUILTIN>", "<SEE NONAME CODE>")


def test_add_returns_increasing_ids():
    sources = Sources()
    first = sources.add("a.no", "fn main() {}")
    second = sources.add("b.no", "")
    assert first == 1
    assert second == first + 1
    assert sources.get(first) == ("a.no", "fn main() {}")
    assert sources.get(second) == ("b.no", "")


def test_unknown_id_is_none():
    sources = Sources()
    sources.add("a.no", "x")
    assert sources.get(42) is None


def test_instances_are_independent():
    one = Sources()
    other = Sources()
    one.add("a.no", "code")
    assert other.get(1) is None
    assert len(other.map) == 1