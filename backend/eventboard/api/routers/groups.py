from fastapi import APIRouter, Depends, HTTPException, Response, status

from eventboard.api.deps import get_group_service
from eventboard.api.errors import internal_error
from eventboard.api.serializers import group_to_dict
from eventboard.core.errors import AlreadyExistsError, NotFoundError
from eventboard.schemas import CreateGroupRequest, UpdateGroupRequest
from eventboard.services import GroupService

router = APIRouter(prefix="/groups", tags=["groups"])

GROUP_NOT_FOUND = "Group not found"
NAME_TAKEN = "A group with this name already exists"


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_group(body: CreateGroupRequest, groups: GroupService = Depends(get_group_service)):
    """
    Create a group.

    Returns:
        dict: The new group, including its (empty) users list

    Raises:
        HTTPException (400): Validation failed or name already taken
        HTTPException (500): Unexpected failure
    """
    try:
        group = await groups.create_group(body)
    except AlreadyExistsError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NAME_TAKEN)
    except Exception:
        raise internal_error("Failed to create group")
    return group_to_dict(group)


@router.get("")
async def list_groups(groups: GroupService = Depends(get_group_service)):
    try:
        rows = await groups.get_groups()
    except Exception:
        raise internal_error("Failed to retrieve groups")
    return [group_to_dict(g) for g in rows]


@router.get("/{group_id}")
async def get_group(group_id: int, groups: GroupService = Depends(get_group_service)):
    try:
        group = await groups.get_group(group_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GROUP_NOT_FOUND)
    except Exception:
        raise internal_error("Failed to retrieve group")
    return group_to_dict(group)


@router.put("/{group_id}")
async def update_group(
    group_id: int,
    body: UpdateGroupRequest,
    groups: GroupService = Depends(get_group_service),
):
    """
    Rename a group. An empty or missing name leaves the group unchanged.

    Raises:
        HTTPException (400): Name already taken
        HTTPException (404): Group not found
        HTTPException (500): Unexpected failure
    """
    try:
        group = await groups.update_group(group_id, body)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GROUP_NOT_FOUND)
    except AlreadyExistsError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=NAME_TAKEN)
    except Exception:
        raise internal_error("Failed to update group")
    return group_to_dict(group)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group(group_id: int, groups: GroupService = Depends(get_group_service)):
    try:
        await groups.delete_group(group_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=GROUP_NOT_FOUND)
    except Exception:
        raise internal_error("Failed to delete group")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ==============================================================================
# Membership
#     Prefix: /api/groups/{group_id}/users/{user_id}
# ==============================================================================
@router.post("/{group_id}/users/{user_id}")
async def add_user_to_group(
    group_id: int,
    user_id: int,
    groups: GroupService = Depends(get_group_service),
):
    """Add a user to a group. Adding an existing member is a no-op."""
    try:
        await groups.add_user_to_group(group_id, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group or User not found")
    except Exception:
        raise internal_error("Failed to add user to group")
    return {"message": "User added to group successfully"}


@router.delete("/{group_id}/users/{user_id}")
async def remove_user_from_group(
    group_id: int,
    user_id: int,
    groups: GroupService = Depends(get_group_service),
):
    """
    Remove a user from a group.

    Removing a user who is not a member succeeds; only a missing group or
    user is an error.
    """
    try:
        await groups.remove_user_from_group(group_id, user_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group or User not found")
    except Exception:
        raise internal_error("Failed to remove user from group")
    return {"message": "User removed from group successfully"}
