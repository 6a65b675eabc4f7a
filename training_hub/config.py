"""Training Hub configuration — loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Root of the repo
REPO_ROOT = Path(__file__).resolve().parent.parent

# Jinja2 templates for the site
WEB_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
STATIC_DIR = Path(__file__).resolve().parent / "static"

# Supabase (read-only access; the service key is accepted as a fallback)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")
SUPABASE_SERVICE_KEY = os.environ.get("SUPABASE_SERVICE_KEY", "")

# Table names
GYMS_TABLE = os.environ.get("GYMS_TABLE", "gyms")
PLANS_TABLE = os.environ.get("PLANS_TABLE", "training_plans")

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))

# Public site URL, used for canonical links (optional)
SITE_URL = os.environ.get("SITE_URL", "").rstrip("/")

# Image fallbacks
GYM_PLACEHOLDER_IMAGE = "https://via.placeholder.com/800x600?text=Gym+Placeholder"
PLAN_PLACEHOLDER_IMAGE = "https://via.placeholder.com/600x400?text=Plan"
PLAN_DETAIL_PLACEHOLDER_IMAGE = "https://via.placeholder.com/600x400?text=Training+Plan+Placeholder"
