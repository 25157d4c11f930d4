"""Tests for OpenAPI customization."""

from mockapi.application import create_app


def test_openapi_schema_lists_all_routes():
    app = create_app()

    schema = app.openapi()

    assert set(schema["paths"]) == {
        "/health",
        "/health/ready",
        "/users",
        "/users/{user_id}",
        "/users/{user_id}/posts",
        "/posts",
        "/posts/{post_id}",
    }
    assert set(schema["paths"]["/posts/{post_id}"]) == {"get", "put", "delete"}
    assert [tag["name"] for tag in schema["tags"]] == ["Health", "Users", "Posts"]


def test_openapi_schema_is_cached():
    app = create_app()

    assert app.openapi() is app.openapi()
