"""Typer CLI application for quiz generation, taking and reporting."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import List, Optional

import typer
import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt
from rich.table import Table

from quizcraft import __version__
from quizcraft.agents.coordinator import build_draft
from quizcraft.agents.llm import create_chat_model
from quizcraft.config.logging import configure_logging
from quizcraft.config.settings import get_settings
from quizcraft.errors import QuizcraftError
from quizcraft.export.docx_generator import export_quiz_with_separate_answers, export_to_docx
from quizcraft.models.quiz import (
    GeneratedQuestion,
    GenerationRequest,
    Identity,
    Question,
    QuestionDifficulty,
    QuestionType,
)
from quizcraft.models.results import QuizAnalytics
from quizcraft.scoring.session import QuizSession
from quizcraft.services.generation import generate_quiz_questions
from quizcraft.services.submission import get_quiz_analytics, submit_attempt
from quizcraft.storage.database import get_session_factory, init_db
from quizcraft.storage.repository import QuizRepository

app = typer.Typer(
    name="quizcraft",
    help="AI-assisted quiz authoring, taking and scoring",
    add_completion=False,
)

console = Console()


@contextmanager
def open_repository() -> Iterator[QuizRepository]:
    db = get_session_factory()()
    try:
        yield QuizRepository(db)
    finally:
        db.close()


def fail(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}", style="bold")
    raise typer.Exit(code=1)


@app.command()
def generate(
    topic: str = typer.Option(..., "--topic", "-t", help="Subject of the questions"),
    question_count: int = typer.Option(5, "--questions", "-q", help="Number of questions", min=1, max=50),
    question_types: List[QuestionType] = typer.Option(
        [QuestionType.MULTIPLE_CHOICE],
        "--type",
        help="Question types (can specify multiple times: --type multiple_choice --type true_false)",
        case_sensitive=False,
    ),
    difficulty: QuestionDifficulty = typer.Option(
        QuestionDifficulty.MEDIUM,
        "--difficulty",
        "-d",
        help="Difficulty level",
        case_sensitive=False,
    ),
    save: bool = typer.Option(False, "--save", help="Store the questions as a new quiz"),
    title: Optional[str] = typer.Option(None, "--title", help="Quiz title when saving (defaults to the topic)"),
    description: Optional[str] = typer.Option(None, "--description", help="Quiz description when saving"),
    owner: str = typer.Option("cli", "--owner", help="Owner user id when saving"),
    publish: bool = typer.Option(False, "--publish", help="Publish the saved quiz immediately"),
) -> None:
    """
    Generate quiz questions with the configured model.

    Example:
        quizcraft generate -t "Ancient Rome" -q 5 --type true_false --save --publish
    """
    settings = get_settings()
    configure_logging(settings.log_level, console)

    request = GenerationRequest(
        topic=topic,
        difficulty=difficulty,
        question_count=question_count,
        question_types=question_types,
    )
    display_config(request)

    try:
        llm = create_chat_model(settings)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("[cyan]Generating questions...", total=None)
            questions = generate_quiz_questions(request, llm=llm)
            progress.update(task, description="[green]Generation complete!")
    except QuizcraftError as e:
        fail(e.message)

    display_generated_questions(questions)

    if not save:
        return

    draft = build_draft(title or request.topic, questions, description=description, publish=publish)
    init_db()
    with open_repository() as repo:
        quiz = repo.create_quiz(draft, Identity(user_id=owner))
    console.print(f"\n[green]✓[/green] Saved quiz [bold]{quiz.title}[/bold] ({quiz.id})")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (defaults to API_HOST)"),
    port: Optional[int] = typer.Option(None, "--port", help="Port (defaults to API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    init_db()
    uvicorn.run(
        "quizcraft.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create the database tables."""
    init_db()
    console.print(f"[green]✓[/green] Database ready at {get_settings().database_url}")


@app.command()
def take(
    quiz_id: str = typer.Argument(..., help="Id of a published quiz"),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Record the attempt under this user id"),
) -> None:
    """Take a published quiz in the terminal and record the attempt."""
    with open_repository() as repo:
        try:
            quiz = repo.get_published_quiz(quiz_id)
        except QuizcraftError as e:
            fail(e.message)

        if not quiz.questions:
            fail("This quiz has no questions")

        session = QuizSession(quiz)
        console.print(Panel(quiz.description or "", title=quiz.title, border_style="cyan"))

        while True:
            question = session.current_question
            console.print(f"\n[bold]Question {session.current_index + 1} of {quiz.question_count}[/bold]")
            session.select_answer(ask_question(question))
            if session.is_last_question:
                break
            session.next_question()

        identity = Identity(user_id=user) if user else None
        try:
            graded, _ = submit_attempt(repo, quiz.id, session.answers, identity)
        except QuizcraftError as e:
            fail(e.message)

    console.print(
        Panel(
            f"[bold]{graded.score}[/bold] / {graded.total_questions}  ({graded.percentage}%)",
            title="Your score",
            border_style="green",
        )
    )
    for i, (question, result) in enumerate(zip(quiz.questions, graded.results), 1):
        mark = "[green]✓[/green]" if result.is_correct else "[red]✗[/red]"
        console.print(f"  {mark} Q{i}. {question.text}")


def ask_question(question: Question) -> str:
    """Prompt for one answer; choice questions are answered by letter."""
    console.print(question.text)

    if question.type == QuestionType.SHORT_ANSWER:
        answer = ""
        while not answer.strip():
            answer = Prompt.ask("Your answer", console=console)
        return answer

    if not question.options:
        fail("This question has no answer options")

    letters = [chr(ord("A") + i) for i in range(len(question.options))]
    for letter, option in zip(letters, question.options):
        console.print(f"   {letter}. {option.text}")
    choice = Prompt.ask("Your choice", choices=letters, console=console)
    return question.options[letters.index(choice)].text


@app.command()
def export(
    quiz_id: str = typer.Argument(..., help="Id of the quiz to export"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output file name (without extension)"),
    separate_answers: bool = typer.Option(
        True,
        "--separate-answers/--single-file",
        help="Write a separate answer key file",
    ),
    include_answers: bool = typer.Option(
        False,
        "--with-answers/--no-answers",
        help="Mark answers inside the quiz document (single file only)",
    ),
    output_dir: str = typer.Option("output", "--output-dir", help="Directory for the exported files"),
) -> None:
    """Export a stored quiz to DOCX."""
    base = output or get_settings().default_output_path

    with open_repository() as repo:
        try:
            quiz = repo.get_quiz(quiz_id)
        except QuizcraftError as e:
            fail(e.message)

    if separate_answers:
        questions_file, answers_file = export_quiz_with_separate_answers(quiz, base, output_dir=output_dir)
        console.print("\n[green]✓[/green] Quiz exported successfully!")
        console.print(f"  Questions: {questions_file}")
        console.print(f"  Answers:   {answers_file}")
    else:
        output_file = export_to_docx(quiz, f"{base}.docx", include_answers, output_dir=output_dir)
        console.print(f"\n[green]✓[/green] Quiz exported to: {output_file}")


@app.command()
def analytics(
    quiz_id: str = typer.Argument(..., help="Id of the quiz"),
    owner: str = typer.Option("cli", "--owner", help="Owner user id"),
) -> None:
    """Show response statistics for a quiz you own."""
    with open_repository() as repo:
        try:
            report = get_quiz_analytics(repo, quiz_id, Identity(user_id=owner))
        except QuizcraftError as e:
            fail(e.message)

    display_analytics(report)


@app.command()
def info() -> None:
    """Display information about quizcraft."""
    settings = get_settings()
    info_text = f"""
[bold cyan]Quizcraft[/bold cyan]
Version: {__version__}

[bold]Generation pipeline:[/bold]
  • Planner - Builds the generation prompt
  • Generator - Makes a single model call
  • Parser - Validates the JSON reply

[bold]Features:[/bold]
  • Multiple choice, true/false and short answer questions
  • Quiz publishing and taking
  • Automatic scoring and per-question analytics
  • DOCX export with answer keys

[bold]Provider:[/bold] {settings.llm_provider}
[bold]Model:[/bold] {settings.model_name}
[bold]Database:[/bold] {settings.database_url}
    """
    console.print(Panel(info_text, title="Quizcraft Info", border_style="cyan"))


def display_config(request: GenerationRequest) -> None:
    """Display the request before generation."""
    table = Table(title="Generation Request", show_header=False, border_style="cyan")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Topic", request.topic)
    table.add_row("Questions", str(request.question_count))
    table.add_row("Types", ", ".join(t.value for t in request.question_types))
    table.add_row("Difficulty", request.difficulty.value.capitalize())

    console.print()
    console.print(table)


def display_generated_questions(questions: List[GeneratedQuestion]) -> None:
    table = Table(title="Generated Questions", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Type", style="white")
    table.add_column("Question", style="white")
    table.add_column("Answer", style="green")

    for i, question in enumerate(questions, 1):
        correct = next((a.text for a in question.answers if a.is_correct), None)
        if question.type == QuestionType.SHORT_ANSWER and question.answers:
            correct = question.answers[0].text
        table.add_row(str(i), question.type.value, question.text, correct or "-")

    console.print()
    console.print(table)


def display_analytics(report: QuizAnalytics) -> None:
    summary = Table(title="Quiz Analytics", show_header=False, border_style="green")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="white")
    summary.add_row("Responses", str(report.total_responses))
    summary.add_row("Average score", f"{report.average_score:.1f}")
    summary.add_row("Highest score", str(report.highest_score))
    summary.add_row("Lowest score", str(report.lowest_score))
    summary.add_row("Completion rate", f"{report.completion_rate:.0f}%")

    console.print()
    console.print(summary)

    per_question = Table(title="Questions", border_style="cyan")
    per_question.add_column("Question", style="white")
    per_question.add_column("Responses", style="white")
    per_question.add_column("Accuracy", style="white")
    per_question.add_column("Answers", style="white")

    for qa in report.question_analytics:
        accuracy = f"{qa.accuracy_rate:.0f}%"
        if qa.accuracy_rate >= 80:
            accuracy = f"[green]{accuracy}[/green]"
        elif qa.accuracy_rate >= 50:
            accuracy = f"[yellow]{accuracy}[/yellow]"
        else:
            accuracy = f"[red]{accuracy}[/red]"
        answers = ", ".join(f"{text}: {count}" for text, count in qa.responses.items())
        per_question.add_row(qa.question_text, str(qa.total_responses), accuracy, answers or "-")

    console.print()
    console.print(per_question)


@app.callback()
def callback() -> None:
    """
    Quizcraft - generate, publish, take and score quizzes.
    """
    pass


if __name__ == "__main__":
    app()
