#!/usr/bin/env python
"""
Run the blog API server.
"""
import sys

import uvicorn

from server import create_blog_app, initialize_state, logger
from src.article_store_factory import create_article_store
from src.config import Config
from src.credential_store_factory import create_credential_store
from src.errors import BlogError


def main():
    """Run the blog API server."""
    # Load configuration once and hand its values to every component
    config = Config()

    try:
        credential_store = create_credential_store(
            state_dir=config.state_dir,
            storage_type=config.credential_storage_type,
            admin_username=config.admin_username,
            admin_password=config.admin_password,
            rounds=config.bcrypt_rounds,
            tigris_settings=config.tigris_settings,
        )
        article_store = create_article_store(
            state_dir=config.state_dir,
            storage_type=config.article_storage_type,
            tigris_settings=config.tigris_settings,
        )
        initialize_state(config, credential_store, article_store)
        app = create_blog_app(
            config=config,
            credential_store=credential_store,
            article_store=article_store,
        )
    except (OSError, ValueError, BlogError) as exc:
        logger.error("Failed to start server: %s", exc)
        sys.exit(1)

    print("Starting blog server...")
    print(f"Listening on http://{config.host}:{config.port}")
    print(f"Health check: http://{config.host}:{config.port}/api/health")

    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
