class TestConsole:
    """Console のテスト"""

    def test_ask_strips_input(self, create_console):
        console, output = create_console("  Ahmad  ")
        assert console.ask("Enter name") == "Ahmad"
        assert output == ["Enter name"]

    def test_ask_int_reprompts_until_valid(self, create_console):
        """範囲外・数値以外の入力はエラー表示の後に再入力となる"""
        console, output = create_console("abc", "9", "3")

        value = console.ask_int("Choose", 1, 4, "Choose 1-4 only")

        assert value == 3
        errors = [line for line in output if "E R R O R" in line]
        assert len(errors) == 2
        assert "Choose 1-4 only" in errors[0]

    def test_ask_int_default_error_message(self, create_console):
        console, output = create_console("0", "1")
        console.ask_int("Choose", 1, 2)
        assert any("Choose 1-2 only" in line for line in output)

    def test_ask_choice_is_case_insensitive(self, create_console):
        console, _ = create_console("b")
        assert console.ask_choice("Choose", {"A": 1, "B": 2}) == 2

    def test_ask_choice_invalid_key(self, create_console):
        console, output = create_console("x", "a")
        assert console.ask_choice("Choose", {"A": 1, "B": 2}) == 1
        assert any("Choose (A / B) only" in line for line in output)

    def test_confirm(self, create_console):
        console, _ = create_console("1", "2")
        assert console.confirm("OK?") is True
        assert console.confirm("OK?") is False

    def test_confirm_invalid_option(self, create_console):
        console, output = create_console("3", "1")
        assert console.confirm("OK?") is True
        assert any("Invalid option chosen (1-YES   2-NO)" in line for line in output)
