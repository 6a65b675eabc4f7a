"""Gym directory page — GET /gyms"""

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from training_hub.config import WEB_TEMPLATES_DIR
from training_hub import supabase_client as db
from training_hub.filters import apply_params, filter_menu, state_params
from training_hub.filters.params import QUERY_PARAM
from training_hub.models import build_gyms
from training_hub.services import metadata
from training_hub.services.gym_directory import build_gym_filter

router = APIRouter()
templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))


@router.get("/gyms")
async def gym_directory(request: Request):
    meta = metadata.page_meta(metadata.GYMS, "/gyms")
    try:
        gyms = build_gyms(db.get_gyms())
    except db.FetchError:
        return templates.TemplateResponse(request, "load_failed.html", {
            "meta": meta,
            "active_page": "gyms",
            "what": "gyms",
        }, status_code=503)

    state = apply_params(build_gym_filter(gyms), request.query_params)
    params = state_params(state)

    context = {
        "meta": meta,
        "active_page": "gyms",
        "state": state,
        "gyms": state.filtered,
        "total": len(state.source),
        "menu": filter_menu(state, "/gyms"),
        "hidden": {k: v for k, v in params.items() if k != QUERY_PARAM},
        "path": "/gyms",
    }

    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(request, "partials/gym_directory_body.html", context)

    return templates.TemplateResponse(request, "gyms/list.html", context)
