from sqlmodel import Session

from medilink.models.product import Product
from medilink.repositories.product_repo import ProductRepository


class ProductService:
    """
    Read side of the shop catalog. Products are managed through the
    payment provider's dashboard, not through this API.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list_active(session)
