"""
API routes for the calculators.
"""

from fastapi import APIRouter

from fincalc.api import calculators, catalog

router = APIRouter()

# Include sub-routers
router.include_router(catalog.router, prefix="/calculators", tags=["catalog"])
router.include_router(calculators.router, prefix="/calculate", tags=["calculations"])
