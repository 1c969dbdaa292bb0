"""
Broz Kinks API Server
Kink taxonomy and compatibility matching for the Broz front end.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from broz import __version__, config
from broz.matching.admin import router as matching_router
from broz.taxonomy.admin import router as taxonomy_router
from broz.taxonomy import get_taxonomy


# ============================================
# App Configuration
# ============================================
app = FastAPI(
    title="Broz Kinks API",
    description="Kink taxonomy and compatibility matching",
    version=__version__
)

# ============================================
# CORS Configuration
# ============================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ============================================
# Routers
# ============================================
app.include_router(taxonomy_router)
app.include_router(matching_router)


# ============================================
# Health & Version Endpoints
# ============================================
@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/version")
async def version():
    return {
        "api_version": __version__,
        "taxonomy_hash": get_taxonomy().version_hash,
    }
