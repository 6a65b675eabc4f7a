"""Gyms API — GET /api/gyms returns the raw gym rows as JSON."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from training_hub import supabase_client as db

router = APIRouter()


@router.get(
    "/api/gyms",
    summary="List gyms",
    description="Returns every gym in the directory. No filtering or pagination.",
    tags=["Gyms"],
)
async def list_gyms():
    try:
        rows = db.get_gyms(columns=db.GYM_API_COLUMNS)
    except db.FetchError as e:
        return JSONResponse({"error": str(e)}, status_code=500)

    return JSONResponse({"gyms": rows}, status_code=200)
