from typing import Generator, Optional


def make_question(transport, text: str, default: Optional[str] = None) -> Generator[None, str, str]:
    """Write ``text`` as a prompt and suspend until one line comes back.

    Use with ``yield from`` inside a command; the session resumes the
    command with the next line the client sends. Returns that line with
    surrounding whitespace removed.
    """
    transport.write_prompt(text, default=default)
    answer = yield
    return answer.strip()
