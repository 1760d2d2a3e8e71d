"""CLI (Typer + Rich) sobre el cliente QuestionIt."""
