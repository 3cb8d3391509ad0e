from src.apps.blog.schemas.post import Intent, PostCreate, parse_intent, parse_post_form


def test_complete_form_is_accepted():
    result = parse_post_form({"title": "Hello", "slug": "hello", "markdown": "# Hi"})

    assert result.is_valid
    assert result.post == PostCreate(title="Hello", slug="hello", markdown="# Hi")
    assert not any(result.errors.values())


def test_empty_title_reports_only_title():
    result = parse_post_form({"title": "", "slug": "hello", "markdown": "# Hi"})

    assert not result.is_valid
    messages = {field: msg for field, msg in result.errors.items() if msg}
    assert messages == {"title": "Title is required!"}


def test_every_missing_field_is_reported():
    result = parse_post_form({})

    assert result.errors == {
        "title": "Title is required!",
        "slug": "Slug is required!",
        "markdown": "Markdown is required!",
    }


def test_non_string_value_is_missing():
    result = parse_post_form({"title": "T", "slug": "s", "markdown": object()})

    assert result.errors["markdown"] == "Markdown is required!"


def test_intent_parsing():
    assert parse_intent("delete", "hello") is Intent.DELETE
    assert parse_intent("update", "hello") is Intent.UPDATE
    assert parse_intent(None, "new") is Intent.CREATE
    assert parse_intent("", "hello") is Intent.UPDATE
    assert parse_intent("publish", "hello") is None
