"""quizcraft - author, publish, take and analyze quizzes with AI-assisted generation."""

__version__ = "0.1.0"
