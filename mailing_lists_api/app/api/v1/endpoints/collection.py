"""
Raw collection endpoint.

``GET /`` returns the stored collection exactly as it is found in the
data file, including any record the service itself would not write.
"""

from typing import Any, List

from fastapi import APIRouter, Depends

from mailing_lists_api.app.core.storage import Store, get_store
from mailing_lists_api.app.services.mailing_list_service import MailingListService

router = APIRouter()


@router.get("/", response_model=List[Any], summary="Get the whole collection")
async def get_collection(store: Store = Depends(get_store)) -> List[Any]:
    return await MailingListService.get_collection(store)
