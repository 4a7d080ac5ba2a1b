from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List
from focushub.app.schemas.distraction_schemas import (
    DistractionSiteCreate, DistractionSiteUpdate, DistractionSiteResponse)
from focushub.app.schemas.base_schemas import MessageResponse
from focushub.data_layer.repos.distraction_repo import DistractionSiteRepository
from focushub.data_layer.models.distraction_model import DistractionSite
from focushub.api.dependencies import get_distraction_repo
from focushub.api.route_utils import get_owned_or_404
from focushub.utils.auth import get_current_user_id
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/distraction-sites", tags=["Distraction Sites"])


@router.get("", response_model=List[DistractionSiteResponse])
def list_sites(blocked: bool = Query(False, description="Only sites currently blocked"),
               user_id: str = Depends(get_current_user_id),
               site_repo: DistractionSiteRepository = Depends(get_distraction_repo)):
    try:
        if blocked:
            sites = site_repo.find_blocked(user_id)
        else:
            sites = site_repo.find_by_user(user_id)
    except Exception as e:
        logger.error(f"Error fetching distraction sites: {str(e)}")
        raise HTTPException(
            status_code=500, detail="Failed to fetch distraction sites")
    return [DistractionSiteResponse(**s.model_dump()) for s in sites]


@router.post("", response_model=DistractionSiteResponse)
def create_site(site: DistractionSiteCreate, user_id: str = Depends(get_current_user_id),
                site_repo: DistractionSiteRepository = Depends(get_distraction_repo)):
    site_data = site.model_dump()
    site_data["user_id"] = user_id
    site_id = site_repo.create_site(DistractionSite(**site_data))
    created = site_repo.find_by_id(site_id)
    if not created:
        raise HTTPException(status_code=500, detail="Site creation failed")
    logger.info(f"Added distraction site {created.url} for user {user_id}")
    return DistractionSiteResponse(**created.model_dump())


@router.put("/{site_id}", response_model=DistractionSiteResponse)
def update_site(site_id: str, site: DistractionSiteUpdate, user_id: str = Depends(get_current_user_id),
                site_repo: DistractionSiteRepository = Depends(get_distraction_repo)):
    get_owned_or_404(site_repo, site_id, user_id, "Site")
    updated = site_repo.update_site(site_id, site.model_dump(exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=404, detail="Site not found")
    return DistractionSiteResponse(**updated.model_dump())


@router.delete("/{site_id}", response_model=MessageResponse)
def delete_site(site_id: str, user_id: str = Depends(get_current_user_id),
                site_repo: DistractionSiteRepository = Depends(get_distraction_repo)):
    get_owned_or_404(site_repo, site_id, user_id, "Site")
    if not site_repo.delete_site(site_id):
        raise HTTPException(status_code=404, detail="Site not found")
    logger.info(f"Deleted distraction site {site_id}")
    return MessageResponse(message="Site deleted successfully")
