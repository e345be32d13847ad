"""Sanitização e renderização dos corpos do email de contato."""

from __future__ import annotations

from app.domain.contact import ContactSubmission, NewlineStrategy

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)

_HTML_TEMPLATE = """
      <html>
        <body style="font-family: Arial, sans-serif; background-color: #000000; color: #FFD200; padding: 20px;">
        <h1 style="color: #EEEEEE;">[ops] New Contact Us Message Received</h1>
          <div style="background-color: #000000; padding: 20px; border-radius: 5px;">
            <p><strong>Name:</strong> {first_name} {last_name}</p>
            <p><strong>Email:</strong> {email}</p>
            <p><strong>Message:</strong></p>
            <p>{message}</p>
          </div>
        </body>
      </html>
    """


def escape_html(value: str) -> str:
    """Escapa &, <, >, aspas duplas e simples para entidades HTML."""
    return str(value).translate(_HTML_ESCAPES)


def _apply_newline_strategy(value: str, strategy: NewlineStrategy) -> str:
    normalized = value.replace("\r\n", "\n")
    if strategy is NewlineStrategy.BREAK:
        return normalized.replace("\n", "<br>")
    return normalized.replace("\n", "")


def render_text_body(submission: ContactSubmission) -> str:
    """Corpo text/plain com os valores originais, sem escape."""
    return (
        f"Name: {submission.first_name} {submission.last_name}\n"
        f"Email: {submission.email}\n"
        f"Message: {submission.message}"
    )


def render_html_body(
    submission: ContactSubmission,
    newline_strategy: NewlineStrategy,
) -> str:
    """Corpo text/html com todos os campos escapados.

    O escape acontece antes da troca de quebras de linha, então o único
    markup vindo da mensagem é o <br> inserido aqui.
    """
    message = _apply_newline_strategy(escape_html(submission.message), newline_strategy)
    return _HTML_TEMPLATE.format(
        first_name=escape_html(submission.first_name),
        last_name=escape_html(submission.last_name),
        email=escape_html(submission.email),
        message=message,
    )
