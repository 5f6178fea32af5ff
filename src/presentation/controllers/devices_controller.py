"""
Devices Router - Presentation Layer

This module defines the FastAPI router for device endpoints. Every
handler extracts its parameters, calls exactly one use case and maps the
outcome to a response; business rules and persistence stay out of here.
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import (
    APIRouter,
    BackgroundTasks,
    Body,
    Depends,
    HTTPException,
    Query,
    status,
)

from src.application.dtos.device_dto import (
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
    VerificationResultDTO,
    VerifyDeviceRequestDTO,
)
from src.application.use_cases.device_use_cases import (
    DeleteDeviceUseCase,
    GetDeviceByMacIdUseCase,
    GetDevicesUseCase,
    RegisterDeviceUseCase,
    UpdateDeviceUseCase,
    VerifyDeviceUseCase,
)
from src.domain.entities.errors import (
    DeviceAlreadyExistsError,
    DeviceNotFoundError,
    DeviceOperationError,
    DeviceRepositoryError,
    DeviceValidationError,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/devices", tags=["Devices"])


def _unavailable(e: DeviceRepositoryError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=str(e),
    )


@router.post(
    "/verify",
    response_model=VerificationResultDTO,
    response_model_exclude_none=True,
)
@inject
async def verify_device(
    background_tasks: BackgroundTasks,
    request_dto: Optional[VerifyDeviceRequestDTO] = Body(default=None),
    verify_device_use_case: VerifyDeviceUseCase = Depends(
        Provide["verify_device_use_case"]
    ),
) -> VerificationResultDTO:
    """
    Verify that a device is known and not blocked.

    Known outcomes are always answered with 200 and a body of
    ``{"ok": true}`` or ``{"ok": false, "reason": "NOT_FOUND" | "BLOCKED"}``.
    The audit record is written after the response is sent.

    Raises:
        HTTPException: 400 when the MAC id is missing, 503 when the device
            store is unavailable, 500 on unexpected failures
    """
    mac_id = request_dto.mac_id if request_dto is not None else None
    logger.debug("devices.verify.requested")

    try:
        result = await verify_device_use_case.execute(mac_id)
        background_tasks.add_task(verify_device_use_case.record_outcome, mac_id, result)
        return VerificationResultDTO.from_domain(result)
    except DeviceValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except DeviceRepositoryError as e:
        raise _unavailable(e)
    except Exception as e:
        logger.error("devices.verify.failed", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to verify device: {str(e)}",
        )


@router.get("", response_model=List[DeviceResponseDTO])
@inject
async def get_devices(
    skip: int = Query(0, ge=0, description="Number of devices to skip"),
    limit: int = Query(
        100, ge=1, le=1000, description="Maximum number of devices to return"
    ),
    blocked: Optional[bool] = Query(None, description="Filter by blocked flag"),
    get_devices_use_case: GetDevicesUseCase = Depends(Provide["get_devices_use_case"]),
) -> List[DeviceResponseDTO]:
    """List registered devices."""
    try:
        return await get_devices_use_case.execute(
            skip=skip, limit=limit, blocked=blocked
        )
    except DeviceRepositoryError as e:
        raise _unavailable(e)
    except Exception as e:
        logger.error("devices.list.failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "",
    response_model=DeviceResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def register_device(
    device_dto: DeviceCreateDTO,
    register_device_use_case: RegisterDeviceUseCase = Depends(
        Provide["register_device_use_case"]
    ),
) -> DeviceResponseDTO:
    """Register a new device."""
    try:
        return await register_device_use_case.execute(device_dto=device_dto)
    except DeviceValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DeviceAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except DeviceRepositoryError as e:
        raise _unavailable(e)
    except DeviceOperationError as e:
        logger.error("devices.register.failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("devices.register.unexpected_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.get("/{mac_id}", response_model=DeviceResponseDTO)
@inject
async def get_device(
    mac_id: str,
    get_device_use_case: GetDeviceByMacIdUseCase = Depends(
        Provide["get_device_by_mac_id_use_case"]
    ),
) -> DeviceResponseDTO:
    """Get a device by MAC id."""
    try:
        return await get_device_use_case.execute(mac_id=mac_id)
    except DeviceValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except DeviceRepositoryError as e:
        raise _unavailable(e)
    except Exception as e:
        logger.error("devices.get.failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.patch("/{mac_id}", response_model=DeviceResponseDTO)
@inject
async def update_device(
    mac_id: str,
    device_dto: DeviceUpdateDTO,
    update_device_use_case: UpdateDeviceUseCase = Depends(
        Provide["update_device_use_case"]
    ),
) -> DeviceResponseDTO:
    """Block, unblock or relabel a device."""
    try:
        return await update_device_use_case.execute(
            mac_id=mac_id, device_dto=device_dto
        )
    except DeviceValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except DeviceRepositoryError as e:
        raise _unavailable(e)
    except DeviceOperationError as e:
        logger.error("devices.update.failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("devices.update.unexpected_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.delete("/{mac_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_device(
    mac_id: str,
    delete_device_use_case: DeleteDeviceUseCase = Depends(
        Provide["delete_device_use_case"]
    ),
) -> None:
    """Delete a device by MAC id."""
    try:
        await delete_device_use_case.execute(mac_id=mac_id)
    except DeviceValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except DeviceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except DeviceRepositoryError as e:
        raise _unavailable(e)
    except DeviceOperationError as e:
        logger.error("devices.delete.failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error("devices.delete.unexpected_error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
