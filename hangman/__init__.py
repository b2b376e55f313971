"""Hangman: game server, HTTP client and letter-guessing solvers."""

__version__ = "0.1.0"
