from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.database import get_db
from wellbeing.schemas.users import (
    UserCountResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from wellbeing.services.user_service import DuplicateUsernameError, UserService

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(db: AsyncSession = Depends(get_db)):
    users, data_source = await UserService(db).list_users()
    return UserListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        data_source=data_source,
    )


# /{user_id} 보다 먼저 등록해야 함
@router.get("/count", response_model=UserCountResponse)
async def count_users(db: AsyncSession = Depends(get_db)):
    return UserCountResponse(count=await UserService(db).count())


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await UserService(db).get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail=f"User with ID {user_id} not found")
    return user


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(payload: UserCreateRequest, db: AsyncSession = Depends(get_db)):
    try:
        return await UserService(db).create(payload)
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, payload: UserUpdateRequest, db: AsyncSession = Depends(get_db)):
    service = UserService(db)

    user = await service.get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=404, detail=f"User with ID {user_id} not found")

    return await service.update(user, payload)


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    if not await UserService(db).delete(user_id):
        raise HTTPException(status_code=404, detail=f"User with ID {user_id} not found")
    return Response(status_code=204)
