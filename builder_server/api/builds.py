# builder_server/api/builds.py

import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from builder_server import crud
from builder_server.core.auth import require_user
from builder_server.core.errors import InternalError, NotFoundError
from builder_server.database import get_db
from builder_server.schemas import SaveBuildRequest


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/save")
def save_build(req: SaveBuildRequest, db: Session = Depends(get_db)):
    auth = require_user(req.userId)
    bricks = [brick.model_dump(exclude_none=True) for brick in req.bricks]

    try:
        build = crud.create_build(db, auth.user_id, bricks, name=req.name)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Saving build for user %s failed", auth.user_id)
        raise InternalError(str(e))

    logger.info("Build saved: %s (%d bricks)", build.id, len(bricks))
    return {"success": True, "id": build.id}


@router.get("/history/{user_id}")
def get_history(user_id: str, request: Request, db: Session = Depends(get_db)):
    """
    Returns the user's most recent builds, newest first.
    """
    auth = require_user(user_id)
    limit = request.app.state.settings.history_limit

    try:
        builds = crud.list_recent_builds(db, auth.user_id, limit=limit)
    except SQLAlchemyError as e:
        logger.exception("Loading history for user %s failed", auth.user_id)
        raise InternalError(str(e))

    logger.debug("History for %s: %d builds", auth.user_id, len(builds))
    return [build.to_document() for build in builds]


@router.get("/load/{build_id}")
def load_build(build_id: str, db: Session = Depends(get_db)):
    try:
        build = crud.get_build(db, build_id)
    except SQLAlchemyError as e:
        logger.exception("Loading build %s failed", build_id)
        raise InternalError(str(e))

    if not build:
        raise NotFoundError("Build not found")
    return build.to_document()
