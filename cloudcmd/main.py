#!/usr/bin/env python3
"""
cloudcmd - HTTP Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Exposes the converter over HTTP

All conversion logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from cloudcmd import __version__
from cloudcmd.config.provider import ConfigProvider, EnvConfigProvider
from cloudcmd.errors import ConversionError
from cloudcmd.modules.api import ConvertResponse
from cloudcmd.modules.converter import convert

logger = logging.getLogger("cloudcmd.api")


def create_app(config_provider: Optional[ConfigProvider] = None) -> FastAPI:
    """Build the FastAPI application around a configuration provider."""
    config_provider = config_provider or EnvConfigProvider()
    api_config = config_provider.get_api_config()
    decoder_config = config_provider.get_decoder_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"Starting cloudcmd API (chain_encodings={decoder_config.chain_encodings}, "
            f"strict_encodings={decoder_config.strict_encodings})"
        )
        yield
        logger.info("cloudcmd API shutdown complete")

    app = FastAPI(
        title="cloudcmd API",
        description="Convert cloud-config documents into provisioning commands",
        version=__version__,
        debug=api_config.debug,
        lifespan=lifespan,
    )

    @app.post("/convert", response_model=ConvertResponse)
    async def convert_config(request: Request):
        """
        Convert the raw cloud-config in the request body.

        Returns:
            200: All commands
            413: Payload too large
            422: Conversion failed, body carries the safe command prefix
        """
        raw = await request.body()
        if len(raw) > api_config.max_payload_bytes:
            raise HTTPException(
                413, f"Payload exceeds {api_config.max_payload_bytes} bytes"
            )

        try:
            commands = convert(raw, decoder_config)
        except ConversionError as e:
            logger.warning(f"Conversion failed ({e.kind}): {e.message}")
            response = ConvertResponse.from_commands(e.commands, e)
            return JSONResponse(status_code=422, content=response.model_dump(mode="json"))

        # Serialized here so binary stdin goes out in its base64 wire form
        response = ConvertResponse.from_commands(commands)
        return JSONResponse(content=response.model_dump(mode="json"))

    @app.get("/healthz")
    async def healthz():
        """Minimal health check endpoint for Kubernetes liveness checks."""
        return {"status": "ok"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint with version information."""
        return {"status": "healthy", "version": __version__}

    return app


# ASGI entry point: uvicorn cloudcmd.main:app
app = create_app()
