"""
Blog API server.
Authenticates the admin user and serves create/read/update/delete
operations over the article store.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.article_store import ArticleStore
from src.article_store_factory import create_article_store
from src.config import Config
from src.credential_store import CredentialStore, SeededCredentialStore
from src.credential_store_factory import create_credential_store
from src.default_articles import DEFAULT_ARTICLES
from src.errors import (
    BlogError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from src.file_utils import get_utc_timestamp
from src.passwords import verify_password
from src.token_service import TokenService, extract_bearer_token

API_VERSION = "1.0.0"

# Configure blog logger
logger = logging.getLogger('blog')
logger.setLevel(logging.INFO)

# Add console handler if not already present
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


def sanitize_log_input(value: Any) -> str:
    """
    Sanitize user input for logging to prevent log injection attacks.
    Removes newlines and other control characters that could be used for log forging.

    Args:
        value: The user input to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not isinstance(value, str):
        value = str(value)
    sanitized = value.replace('\n', '_').replace('\r', '_').replace('\t', '_')
    # Truncate to reasonable length to prevent log flooding
    return sanitized[:200]


def initialize_state(config: Config, credential_store: CredentialStore,
                     article_store: ArticleStore) -> None:
    """
    Seed the default admin and welcome articles on first startup.

    Stores whose backing storage already exists are left untouched.

    Raises:
        OSError: If local storage cannot be written
        StorageError: If a store cannot be checked or written
    """
    if isinstance(credential_store, SeededCredentialStore):
        credential_store.ensure_default_admin(
            config.admin_username,
            config.admin_password,
            rounds=config.bcrypt_rounds,
        )
    article_store.seed_default_articles(DEFAULT_ARTICLES)


def _parse_article_id(article_id: str) -> int:
    """Convert a path id to an int; ids that are not integers never match an article."""
    try:
        return int(article_id)
    except ValueError as exc:
        raise NotFoundError("Article not found") from exc


def create_blog_app(
    config: Optional[Config] = None,
    credential_store: Optional[CredentialStore] = None,
    article_store: Optional[ArticleStore] = None,
    token_service: Optional[TokenService] = None,
) -> FastAPI:
    """
    Create the blog FastAPI application.

    Args:
        config: Configuration (defaults to a fresh Config())
        credential_store: Optional credential store (defaults to factory-created)
        article_store: Optional article store (defaults to factory-created)
        token_service: Optional token service (defaults to one built from config)

    Returns:
        FastAPI application instance
    """
    if config is None:
        config = Config()
    if credential_store is None:
        credential_store = create_credential_store(
            state_dir=config.state_dir,
            storage_type=config.credential_storage_type,
            admin_username=config.admin_username,
            admin_password=config.admin_password,
            rounds=config.bcrypt_rounds,
            tigris_settings=config.tigris_settings,
        )
    if article_store is None:
        article_store = create_article_store(
            state_dir=config.state_dir,
            storage_type=config.article_storage_type,
            tigris_settings=config.tigris_settings,
        )
    if token_service is None:
        token_service = TokenService(
            secret=config.jwt_secret,
            algorithm=config.jwt_algorithm,
            expires_in=config.token_expiry,
        )
    development = config.is_development

    app = FastAPI(title="Blog Backend", version=API_VERSION)
    app.state.credential_store = credential_store
    app.state.article_store = article_store
    app.state.token_service = token_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def server_error(detail: str) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": detail if development else "Something went wrong",
            },
        )

    # ================== ERROR HANDLERS ==================
    @app.exception_handler(BlogError)
    async def handle_blog_error(request: Request, exc: BlogError):
        """Map domain errors to their status codes."""
        line = f"{request.method} {sanitize_log_input(request.url.path)}"
        if isinstance(exc, StorageError):
            logger.error(f"{line} - 500 {exc.message}: {exc.__cause__}")
            return server_error(exc.message)
        logger.warning(f"{line} - {exc.status_code} {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        """Answer routing errors with the same error body as domain errors."""
        error = "Route not found" if exc.status_code == 404 else exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": error},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Last-resort handler for anything the routes did not anticipate."""
        logger.exception(f"{request.method} {sanitize_log_input(request.url.path)} - 500 Server error")
        return server_error(str(exc))

    # ================== REQUEST HELPERS ==================
    async def read_json_body(request: Request) -> Dict[str, Any]:
        """Parse the request body as a JSON object."""
        try:
            data = await request.json()
        except ValueError as exc:
            raise ValidationError("Request body must be valid JSON") from exc
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    def authenticate(request: Request) -> Dict[str, Any]:
        """Verify the bearer token and return its claims."""
        token = extract_bearer_token(request.headers.get("Authorization"))
        return token_service.verify(token)

    # ================== AUTH API ==================
    @app.post("/api/login")
    async def login(request: Request):
        """Exchange admin credentials for a token."""
        logger.info("POST /api/login")
        data = await read_json_body(request)
        username = data.get("username")
        password = data.get("password")

        if not isinstance(username, str) or not isinstance(password, str) or not username or not password:
            raise ValidationError("Username and password required")

        user = credential_store.find_by_username(username)
        if user is None or not verify_password(password, user.get("password", "")):
            raise InvalidCredentialsError()

        identity = {
            "id": user.get("id"),
            "username": user.get("username"),
            "role": user.get("role"),
        }
        token = token_service.issue(identity)
        logger.info(f"POST /api/login - 200 {sanitize_log_input(username)} logged in")
        return {"success": True, "token": token, "user": identity}

    @app.get("/api/verify")
    async def verify(request: Request):
        """Check that the bearer token is still valid."""
        logger.info("GET /api/verify")
        claims = authenticate(request)
        return {"success": True, "user": claims}

    # ================== ARTICLES API ==================
    @app.get("/api/articles")
    async def list_articles() -> List[Dict]:
        """Get all articles, newest first."""
        logger.info("GET /api/articles")
        return article_store.list_articles()

    @app.get("/api/articles/{article_id}")
    async def get_article(article_id: str):
        """Get a single article."""
        sanitized_id = sanitize_log_input(article_id)
        logger.info(f"GET /api/articles/{sanitized_id}")
        article = article_store.get_article(_parse_article_id(article_id))
        if article is None:
            raise NotFoundError("Article not found")
        return article

    @app.post("/api/articles", status_code=201)
    async def create_article(request: Request):
        """Create an article authored by the caller."""
        logger.info("POST /api/articles")
        claims = authenticate(request)
        data = await read_json_body(request)

        article = article_store.create_article(
            title=data.get("title"),
            content=data.get("content"),
            author=claims.get("username"),
            date=data.get("date") or None,
        )
        logger.info(f"POST /api/articles - 201 Created article {article['id']}")
        return article

    @app.put("/api/articles/{article_id}")
    async def update_article(article_id: str, request: Request):
        """Replace title, content and date of an article."""
        sanitized_id = sanitize_log_input(article_id)
        logger.info(f"PUT /api/articles/{sanitized_id}")
        authenticate(request)
        data = await read_json_body(request)

        article = article_store.update_article(
            _parse_article_id(article_id),
            title=data.get("title"),
            content=data.get("content"),
            date=data.get("date") or None,
        )
        if article is None:
            raise NotFoundError("Article not found")
        logger.info(f"PUT /api/articles/{sanitized_id} - 200")
        return article

    @app.delete("/api/articles/{article_id}")
    async def delete_article(article_id: str, request: Request):
        """Delete an article."""
        sanitized_id = sanitize_log_input(article_id)
        logger.info(f"DELETE /api/articles/{sanitized_id}")
        authenticate(request)

        if not article_store.delete_article(_parse_article_id(article_id)):
            raise NotFoundError("Article not found")
        logger.info(f"DELETE /api/articles/{sanitized_id} - 200")
        return {"success": True, "message": "Article deleted successfully"}

    # ================== HEALTH ==================
    @app.get("/api/health")
    async def health():
        """Report liveness."""
        return {"status": "healthy", "timestamp": get_utc_timestamp(), "version": API_VERSION}

    return app
