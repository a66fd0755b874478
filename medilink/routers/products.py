from fastapi import APIRouter, Depends
from sqlmodel import Session

from medilink.database import get_session
from medilink.repositories.product_repo import ProductRepository
from medilink.schemas.product import ProductRead
from medilink.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    List active products.

    - Public endpoint.
    """
    return service.list_products(session)
