"""DOCX document generator for quiz export."""

from datetime import datetime
from pathlib import Path
from string import ascii_uppercase

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches, Pt, RGBColor

from quizcraft.models.quiz import Question, QuestionType, Quiz

TYPE_LABELS = {
    QuestionType.MULTIPLE_CHOICE: "Multiple choice",
    QuestionType.TRUE_FALSE: "True / False",
    QuestionType.SHORT_ANSWER: "Short answer",
}

HEADING_COLOR = RGBColor(0, 51, 102)
CORRECT_COLOR = RGBColor(0, 128, 0)
MUTED_COLOR = RGBColor(128, 128, 128)


def ensure_output_directory(output_dir: str = "output") -> Path:
    """
    Ensure the output directory exists.

    Args:
        output_dir: Directory path to create

    Returns:
        Path object for the output directory
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def generate_timestamped_filename(base_name: str, suffix: str = "", extension: str = "docx") -> str:
    """Build ``<base>[_<suffix>]_<YYYYmmdd_HHMMSS>.<extension>`` from the bare file name."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    base_name = Path(base_name).stem
    if suffix:
        base_name = f"{base_name}_{suffix}"
    return f"{base_name}_{timestamp}.{extension}"


def option_label(index: int) -> str:
    return ascii_uppercase[index] if index < len(ascii_uppercase) else str(index + 1)


def answer_text(question: Question) -> str:
    """The answer shown in the key for one question."""
    if question.type == QuestionType.SHORT_ANSWER:
        return question.reference_answer or "Open answer"

    for i, option in enumerate(question.options):
        if option.is_correct:
            return f"{option_label(i)} - {option.text}"
    return "Not set"


def export_to_docx(
    quiz: Quiz,
    output_path: str,
    include_answers: bool = False,
    use_output_dir: bool = True,
    output_dir: str = "output",
) -> str:
    """
    Export a quiz to a formatted DOCX file.

    Args:
        quiz: Quiz to export
        output_path: Target path; only its stem is kept when use_output_dir is set
        include_answers: Mark correct options inline and append an answer key
        use_output_dir: Save under output_dir with a timestamped name
        output_dir: Directory to save files in

    Returns:
        Path to the created DOCX file
    """
    if use_output_dir:
        output_path = str(ensure_output_directory(output_dir) / generate_timestamped_filename(output_path))

    doc = Document()
    setup_document_styles(doc)

    title = doc.add_heading(quiz.title, level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER

    if quiz.description:
        desc_para = doc.add_paragraph(quiz.description)
        desc_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
        desc_para.runs[0].italic = True

    doc.add_paragraph()
    info_para = doc.add_paragraph()
    info_para.add_run(f"Questions: {quiz.question_count}").bold = True
    info_para.add_run("  |  ")
    info_para.add_run(f"Type: {quiz.quiz_type.value.replace('_', ' ').capitalize()}").bold = True
    info_para.alignment = WD_ALIGN_PARAGRAPH.CENTER

    date_para = doc.add_paragraph(f"Created: {quiz.created_at.strftime('%Y-%m-%d %H:%M')}")
    date_para.alignment = WD_ALIGN_PARAGRAPH.CENTER
    date_para.runs[0].font.size = Pt(9)
    date_para.runs[0].font.color.rgb = MUTED_COLOR

    doc.add_page_break()

    for number, question in enumerate(quiz.questions, 1):
        add_question_to_document(doc, number, question, include_answers)

    if include_answers:
        doc.add_page_break()
        add_answer_key(doc, quiz)

    doc.save(output_path)
    return output_path


def setup_document_styles(doc: Document) -> None:
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    for section in doc.sections:
        section.top_margin = Inches(1)
        section.bottom_margin = Inches(1)
        section.left_margin = Inches(1)
        section.right_margin = Inches(1)


def add_question_to_document(doc: Document, number: int, question: Question, include_answers: bool = False) -> None:
    """
    Add one question with its options (or answer lines) to the document.

    Args:
        doc: Document to add to
        number: 1-based question number
        question: Question to render
        include_answers: Highlight the correct option or show the reference answer
    """
    q_para = doc.add_paragraph()
    q_run = q_para.add_run(f"Q{number}. ")
    q_run.bold = True
    q_run.font.size = Pt(12)
    q_para.add_run(question.text)

    type_run = doc.add_paragraph().add_run(f"  {TYPE_LABELS[question.type]}")
    type_run.font.size = Pt(9)
    type_run.italic = True
    type_run.font.color.rgb = MUTED_COLOR

    if question.type == QuestionType.SHORT_ANSWER:
        if include_answers and question.reference_answer:
            ref_para = doc.add_paragraph()
            ref_para.paragraph_format.left_indent = Inches(0.5)
            ref_run = ref_para.add_run(f"Expected answer: {question.reference_answer}")
            ref_run.italic = True
            ref_run.font.color.rgb = CORRECT_COLOR
        else:
            for _ in range(2):
                line = doc.add_paragraph("_" * 60)
                line.paragraph_format.left_indent = Inches(0.5)
    else:
        for i, option in enumerate(question.options):
            opt_para = doc.add_paragraph(f"   {option_label(i)}. {option.text}")
            opt_para.paragraph_format.left_indent = Inches(0.5)

            if include_answers and option.is_correct:
                opt_para.runs[0].bold = True
                opt_para.runs[0].font.color.rgb = CORRECT_COLOR
                opt_para.add_run(" ✓").font.color.rgb = CORRECT_COLOR

    doc.add_paragraph()


def add_answer_key(doc: Document, quiz: Quiz) -> None:
    """Append an answer key table (question number, type, answer)."""
    header = doc.add_heading("Answer Key", level=1)
    header.alignment = WD_ALIGN_PARAGRAPH.CENTER
    header.runs[0].font.color.rgb = HEADING_COLOR

    table = doc.add_table(rows=1, cols=3)
    table.style = "Light Grid Accent 1"

    header_cells = table.rows[0].cells
    header_cells[0].text = "Q#"
    header_cells[1].text = "Type"
    header_cells[2].text = "Answer"
    for cell in header_cells:
        for paragraph in cell.paragraphs:
            for run in paragraph.runs:
                run.bold = True

    for number, question in enumerate(quiz.questions, 1):
        row_cells = table.add_row().cells
        row_cells[0].text = str(number)
        row_cells[1].text = TYPE_LABELS[question.type]
        row_cells[2].text = answer_text(question)


def generate_answer_key(quiz: Quiz, output_path: str) -> str:
    """
    Generate a standalone answer key document.

    Args:
        quiz: Quiz to export
        output_path: Path where the answer key should be saved

    Returns:
        Path to the created answer key file
    """
    doc = Document()
    setup_document_styles(doc)

    title = doc.add_heading(f"{quiz.title} - Answer Key", level=0)
    title.alignment = WD_ALIGN_PARAGRAPH.CENTER
    doc.add_paragraph()

    add_answer_key(doc, quiz)
    doc.save(output_path)
    return output_path


def export_quiz_with_separate_answers(quiz: Quiz, base_path: str, output_dir: str = "output") -> tuple[str, str]:
    """
    Export the questions and the answer key as two timestamped files.

    Returns:
        Tuple of (questions_path, answers_path)
    """
    output_path = ensure_output_directory(output_dir)

    questions_path = str(output_path / generate_timestamped_filename(base_path, "questions"))
    answers_path = str(output_path / generate_timestamped_filename(base_path, "answers"))

    export_to_docx(quiz, questions_path, include_answers=False, use_output_dir=False)
    generate_answer_key(quiz, answers_path)

    return questions_path, answers_path
