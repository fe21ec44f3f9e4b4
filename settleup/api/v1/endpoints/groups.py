from fastapi import APIRouter, HTTPException, Depends, status

from settleup.db.mongo import get_db
from settleup.models.group import Group
from settleup.repositories.group_repo import GroupRepository
from settleup.schemas.group import GroupCreate, GroupResponse, GroupUpdate, MemberAdd, MemberResponse

router = APIRouter()


def to_group_response(group: Group) -> GroupResponse:
    return GroupResponse(
        id=str(group.id),
        name=group.name,
        description=group.description,
        currency=group.currency,
        members=[MemberResponse.model_validate(member) for member in group.members],
        created_at=group.created_at,
        updated_at=group.updated_at
    )


@router.post("/", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
async def create_group(group_in: GroupCreate, db = Depends(get_db)):
    """Create a group with its initial members."""
    user_ids = [member.user_id for member in group_in.members]
    if len(user_ids) != len(set(user_ids)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Duplicate member user_id"
        )
    group = await GroupRepository(db).create_group(group_in)
    return to_group_response(group)


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(group_id: str, db = Depends(get_db)):
    group = await GroupRepository(db).get_group(group_id)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return to_group_response(group)


@router.patch("/{group_id}", response_model=GroupResponse)
async def update_group(group_id: str, group_in: GroupUpdate, db = Depends(get_db)):
    """Edit a group's name, description or currency."""
    group = await GroupRepository(db).update_group(group_id, group_in)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return to_group_response(group)


@router.post("/{group_id}/members", response_model=GroupResponse)
async def add_member(group_id: str, member_in: MemberAdd, db = Depends(get_db)):
    """Add a member to a group."""
    repo = GroupRepository(db)
    group = await repo.get_group(group_id)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    if group.has_member(member_in.user_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User is already a member of this group"
        )
    group = await repo.add_member(group_id, member_in)
    if not group:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return to_group_response(group)
