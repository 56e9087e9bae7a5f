def assert_message_roles(payload, expected_roles):
    """Assert the completion payload carries messages with exactly these roles, in order."""
    roles = [message["role"] for message in payload["messages"]]
    assert roles == expected_roles, f"Expected roles {expected_roles}, got {roles}"


def assert_error_response(response, status_code, error, details=None):
    """Assert an ErrorResponse body with the given status and error text."""
    assert response.status_code == status_code, response.text
    body = response.json()
    assert body["error"] == error
    if details is None:
        assert "details" not in body
    else:
        assert details in body["details"]
