"""Training plan routes — catalogue (GET /training) and detail (GET /plans/{slug})."""

import logging

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from training_hub.config import WEB_TEMPLATES_DIR
from training_hub import supabase_client as db
from training_hub.filters import apply_params, filter_menu, state_params
from training_hub.filters.params import QUERY_PARAM
from training_hub.models import build_plans
from training_hub.services import metadata
from training_hub.services.plan_catalogue import plan_filter
from training_hub.services.plan_detail import plan_view

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))


@router.get("/training")
async def plan_catalogue(request: Request):
    meta = metadata.page_meta(metadata.TRAINING, "/training")
    try:
        plans = build_plans(db.get_training_plans())
    except db.FetchError:
        return templates.TemplateResponse(request, "load_failed.html", {
            "meta": meta,
            "active_page": "training",
            "what": "training plans",
        }, status_code=503)

    state = apply_params(plan_filter(plans), request.query_params)
    params = state_params(state)

    context = {
        "meta": meta,
        "active_page": "training",
        "state": state,
        "plans": state.filtered,
        "total": len(state.source),
        "menu": filter_menu(state, "/training"),
        "hidden": {k: v for k, v in params.items() if k != QUERY_PARAM},
        "path": "/training",
    }

    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(request, "partials/plan_directory_body.html", context)

    return templates.TemplateResponse(request, "plans/list.html", context)


@router.get("/plans/{slug}")
async def plan_detail(request: Request, slug: str):
    try:
        row = db.get_training_plan(slug)
    except db.FetchError:
        row = None

    plans = build_plans([row]) if row else []
    if not plans:
        logger.info("Training plan %r not found", slug)
        return templates.TemplateResponse(request, "plans/not_found.html", {
            "meta": metadata.plan_meta(None),
            "active_page": "training",
        }, status_code=404)

    plan = plans[0]
    context = {
        "meta": metadata.plan_meta(plan, f"/plans/{plan.slug}"),
        "active_page": "training",
        **plan_view(plan),
    }
    return templates.TemplateResponse(request, "plans/detail.html", context)
