"""Contract verification API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from surface_contracts.core.config import Settings, get_settings
from surface_contracts.core.errors import ContractLoadError
from surface_contracts.rules import ContractLoader
from . import service
from .schemas import VerificationReport, VerifyRequest

router = APIRouter(prefix="/verify", tags=["verify"])


@router.post("", response_model=VerificationReport)
async def verify_interface(request: VerifyRequest) -> VerificationReport:
    """
    Verify contract rules against a posted package interface.

    Returns every violation found, in rule order, along with per-kind
    counts and the formatted report text.
    """
    violations = service.verify(request.interface, request.rules)
    return service.build_report(violations)


@router.get("/configured", response_model=VerificationReport)
async def verify_configured(settings: Settings = Depends(get_settings)) -> VerificationReport:
    """
    Verify the configured contract file against the configured interface.

    An interface that cannot be loaded is reported as a single
    interface_load_failure violation. A broken contract file is a 422.
    """
    try:
        rules = ContractLoader(settings.contracts_path).load_file()
    except ContractLoadError as e:
        raise HTTPException(status_code=422, detail=str(e))

    violations = service.verify_file(settings.interface_path, rules)
    return service.build_report(violations)
