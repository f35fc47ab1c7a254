from sqlpilot.parameters import ParameterInfo, RewriteResult


def test_parameter_info_creation() -> None:
    param = ParameterInfo(name="user_id", position=20, ordinal=0, placeholder_text=":user_id")

    assert param.name == "user_id"
    assert param.position == 20
    assert param.ordinal == 0
    assert param.end == 28


def test_parameter_info_equality() -> None:
    """Ordinal does not take part in equality."""
    param1 = ParameterInfo("name", 10, 0, ":name")
    param2 = ParameterInfo("name", 10, 0, ":name")
    param3 = ParameterInfo("name", 10, 1, ":name")
    param4 = ParameterInfo("name", 11, 0, ":name")

    assert param1 == param2
    assert param1 == param3
    assert param1 != param4
    assert param1 != "name"
    assert hash(param1) == hash(param3)
    assert len({param1, param2, param3, param4}) == 2


def test_parameter_info_repr() -> None:
    param = ParameterInfo("id", 5, 0, ":id")

    assert repr(param) == "ParameterInfo(name='id', ordinal=0, placeholder_text=':id', position=5)"


def test_rewrite_result_unpacks() -> None:
    sql, params = RewriteResult("SELECT ?", [1])

    assert sql == "SELECT ?"
    assert params == [1]
