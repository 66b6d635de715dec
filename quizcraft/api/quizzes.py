"""Quiz authoring, taking and reporting endpoints."""

from fastapi import APIRouter, Depends, Response, status

from quizcraft.api.deps import get_identity, get_repository, require_identity
from quizcraft.api.schemas import PublishUpdate, SubmissionRequest, SubmissionResult
from quizcraft.models.quiz import Identity, Quiz, QuizDraft, QuizSummary
from quizcraft.models.results import QuizAnalytics, QuizResponse
from quizcraft.services.submission import get_quiz_analytics, submit_attempt
from quizcraft.storage.repository import QuizRepository

router = APIRouter(prefix="/api/quizzes", tags=["quizzes"])


@router.get("", response_model=list[QuizSummary])
def list_published_quizzes(repo: QuizRepository = Depends(get_repository)):
    return repo.list_published()


@router.post("", response_model=Quiz, status_code=status.HTTP_201_CREATED)
def create_quiz(
    draft: QuizDraft,
    owner: Identity = Depends(require_identity),
    repo: QuizRepository = Depends(get_repository),
):
    return repo.create_quiz(draft, owner)


# declared before /{quiz_id} so "mine" is not taken as an id
@router.get("/mine", response_model=list[QuizSummary])
def list_my_quizzes(
    owner: Identity = Depends(require_identity),
    repo: QuizRepository = Depends(get_repository),
):
    return repo.list_owned(owner)


@router.get("/{quiz_id}", response_model=Quiz)
def get_quiz(quiz_id: str, repo: QuizRepository = Depends(get_repository)):
    return repo.get_published_quiz(quiz_id)


@router.put("/{quiz_id}/publish", response_model=QuizSummary)
def set_published(
    quiz_id: str,
    update: PublishUpdate,
    owner: Identity = Depends(require_identity),
    repo: QuizRepository = Depends(get_repository),
):
    return repo.set_published(quiz_id, owner, update.is_published)


@router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quiz(
    quiz_id: str,
    owner: Identity = Depends(require_identity),
    repo: QuizRepository = Depends(get_repository),
):
    repo.delete_quiz(quiz_id, owner)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{quiz_id}/responses", response_model=SubmissionResult)
def submit_responses(
    quiz_id: str,
    submission: SubmissionRequest,
    identity: Identity | None = Depends(get_identity),
    repo: QuizRepository = Depends(get_repository),
):
    graded, stored = submit_attempt(repo, quiz_id, submission.answers, identity)
    return SubmissionResult(
        response_id=stored.id,
        score=graded.score,
        total_questions=graded.total_questions,
        percentage=graded.percentage,
        results=graded.results,
    )


@router.get("/{quiz_id}/responses", response_model=list[QuizResponse])
def list_my_responses(
    quiz_id: str,
    identity: Identity = Depends(require_identity),
    repo: QuizRepository = Depends(get_repository),
):
    return repo.list_attempts(quiz_id, identity)


@router.get("/{quiz_id}/analytics", response_model=QuizAnalytics)
def quiz_analytics(
    quiz_id: str,
    owner: Identity = Depends(require_identity),
    repo: QuizRepository = Depends(get_repository),
):
    return get_quiz_analytics(repo, quiz_id, owner)
