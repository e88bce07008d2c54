"""
Base64 helpers for GitHub file payloads and playground URLs
"""

import base64


def decode_github_content(content: str) -> str:
    """
    Decode the base64 ``content`` field of a GitHub contents response.

    GitHub wraps the payload at 60 columns; the embedded newlines are ignored.
    """
    if not isinstance(content, str):
        raise ValueError("No content to decode")
    return base64.b64decode(content).decode("utf-8")


def encode_playground_payload(text: str) -> str:
    """Base64 of the UTF-8 bytes of ``text``"""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")
