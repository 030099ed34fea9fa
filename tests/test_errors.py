from kumaclient.errors import KumaError, NotFoundError


def test_not_found_default_message():
    assert str(NotFoundError()) == "not found"


def test_not_found_with_subject():
    err = NotFoundError("get tag 5")
    assert str(err) == "get tag 5: not found"
    assert err.subject == "get tag 5"


def test_not_found_is_a_kuma_error():
    err = NotFoundError("get monitor tags (monitor 3)")
    assert isinstance(err, KumaError)
    assert err.subject == "get monitor tags (monitor 3)"
    assert str(err) == "get monitor tags (monitor 3): not found"


def test_not_found_is_a_lookup_error():
    err = NotFoundError("x")
    assert isinstance(err, LookupError)
    assert str(err) == "x: not found"


def test_kuma_error_message():
    assert str(KumaError("boom")) == "boom"