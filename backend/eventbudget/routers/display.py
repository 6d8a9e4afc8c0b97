"""Static events listing for the display-only page of the web client."""
import json
import logging
from pathlib import Path
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException

from eventbudget.config import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/display", tags=["display"])


@router.get("/events")
def display_events(settings: Annotated[Settings, Depends(get_settings)]) -> Any:
    """Return the static events file as-is. Not backed by the events table."""
    path = Path(settings.display_events_path)
    if not path.is_file():
        logger.warning("Display events file missing: %s", path)
        raise HTTPException(status_code=404, detail="Display events not available")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.error("Display events file %s is not valid JSON: %s", path, e)
        raise HTTPException(status_code=500, detail="Display events file is not valid JSON") from e
