from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_admin.api.errors import register_error_handlers
from hr_admin.api.routes import health
from hr_admin.core.config import settings
from hr_admin.core.logging import configure_logging, get_logger
from hr_admin.core.monitoring import configure_error_monitoring
from hr_admin.core.observability import configure_observability
from hr_admin.db.session import Base, engine
from hr_admin.domains.attendance.router import router as attendance_router
from hr_admin.domains.employees.router import router as employee_router
from hr_admin.domains.leave_requests.router import router as leave_router
from hr_admin.domains.payroll.router import router as payroll_router
from hr_admin.domains.reporting.router import router as reporting_router
from hr_admin.storage.memory import MemoryStorage

configure_logging(settings.log_level)
configure_observability()
configure_error_monitoring()
logger = get_logger(__name__)

app = FastAPI(title=settings.app_name)
app.state.memory_storage = MemoryStorage()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(employee_router)
app.include_router(attendance_router)
app.include_router(leave_router)
app.include_router(payroll_router)
app.include_router(reporting_router)


@app.on_event("startup")
def startup_event() -> None:
    if settings.storage_backend == "database" and settings.create_tables_on_startup:
        Base.metadata.create_all(bind=engine)
    logger.info("startup_complete", env=settings.env, storage=settings.storage_backend)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "HR Admin API running", "environment": settings.env}
