from tikzkit.completion import FUNCTION_ICON, CompletionItem, CompletionModel


def test_initial_state():
    model = CompletionModel()
    assert model.row_count == 0
    assert model.item(0) is None


def test_backslash_words_get_icon():
    model = CompletionModel()
    model.update_completer(True, ["\\draw", "circle"])
    assert model.item(0) == CompletionItem("\\draw", FUNCTION_ICON)
    assert model.item(1) == CompletionItem("circle", None)
    assert FUNCTION_ICON == "code-function"


def test_matches_keep_word_order():
    words = ["b", "\\a", "c"]
    model = CompletionModel()
    model.update_completer(False, words)
    assert [m.name for m in model.matches] == words
    assert model.use_completion is False


def test_row_count_set_on_invoke():
    model = CompletionModel()
    model.update_completer(True, ["x", "y"])
    assert model.row_count == 0
    assert model.completion_invoked() == 2
    assert model.row_count == 2


def test_update_replaces_previous_words():
    model = CompletionModel()
    model.update_completer(True, ["x", "y", "z"])
    model.update_completer(True, ["w"])
    assert model.completion_invoked() == 1
    assert model.item(1) is None


def test_negative_row_is_none():
    model = CompletionModel()
    model.update_completer(True, ["x"])
    assert model.item(-1) is None
    assert model.item(0).name == "x"