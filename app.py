"""Fixed Income Dashboard - Main entry point."""
import logging

from nicegui import app, ui

from config import APP_TITLE, APP_PORT, APP_HOST, LOG_LEVEL
from src.models import init_db
from src.ui.pages.fixed_income_fund import fixed_income_fund_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Initialize database tables on startup
init_db()


@ui.page("/")
def index():
    fixed_income_fund_page()


@ui.page("/fixed-income")
def fixed_income_view():
    fixed_income_fund_page()


@app.get("/_health")
async def health_check():
    return {"status": "ok", "app": "fixed-income-dashboard"}


if __name__ in {"__main__", "__mp_main__"}:
    ui.run(
        title=APP_TITLE,
        host=APP_HOST,
        port=APP_PORT,
        reload=False,
        dark=False,
    )
