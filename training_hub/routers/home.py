"""Home page — GET /"""

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from training_hub.config import WEB_TEMPLATES_DIR
from training_hub.services import metadata

router = APIRouter()
templates = Jinja2Templates(directory=str(WEB_TEMPLATES_DIR))


@router.get("/")
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {
        "meta": metadata.page_meta(metadata.HOME, "/"),
        "active_page": "home",
    })
