from tillscan.receipt.line_parser import LABEL_LOOKAHEAD_LINES, _extract_header_fields


def test_label_lookahead_is_two_lines() -> None:
    assert LABEL_LOOKAHEAD_LINES == 2


def test_first_line_is_company_name_even_when_short() -> None:
    header = _extract_header_fields(["AB", "Longer Name Here"])

    assert header.company_name == "AB"


def test_company_name_skips_numeric_short_and_address_lines() -> None:
    header = _extract_header_fields(["", "12", "ABC", "Main St Address", "Good Foods"])

    assert header.company_name == "Good Foods"


def test_branch_uses_whole_line_with_keyword() -> None:
    header = _extract_header_fields(["Acme", "City Index 5", "Outlet 9"])

    assert header.branch == "Outlet 9"


def test_branch_accepts_city_line() -> None:
    header = _extract_header_fields(["Acme", "Downtown City Center"])

    assert header.branch == "Downtown City Center"


def test_cashier_value_on_same_line() -> None:
    header = _extract_header_fields(["Cashier: 07"])

    assert header.cashier_number == "07"


def test_cashier_label_with_blank_remainder_falls_through_to_lookahead() -> None:
    header = _extract_header_fields(["Shop", "Cashier:", "#12"])

    assert header.cashier_number == "#12"


def test_cashier_lookahead_reaches_second_line_only() -> None:
    assert _extract_header_fields(["Cashier", "Smith", "42"]).cashier_number == "42"
    assert _extract_header_fields(["Cashier", "Smith", "Jones", "42"]).cashier_number is None


def test_cashier_first_match_wins() -> None:
    header = _extract_header_fields(["Cashier", "5", "Cashier", "9"])

    assert header.cashier_number == "5"


def test_cashier_label_must_be_a_word() -> None:
    header = _extract_header_fields(["Cashiers", "12"])

    assert header.cashier_number is None


def test_manager_on_next_line() -> None:
    header = _extract_header_fields(["Manager", "Jane Doe"])

    assert header.manager_name == "Jane Doe"


def test_manager_skips_numeric_and_price_lines() -> None:
    assert _extract_header_fields(["Manager", "123", "Bob"]).manager_name == "Bob"
    assert _extract_header_fields(["Manager", "$5.00", "Ann"]).manager_name == "Ann"


def test_manager_same_line_value_is_case_insensitive() -> None:
    header = _extract_header_fields(["MANAGER: Lee"])

    assert header.manager_name == "Lee"
