#storefront/data/models/category.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class CategoryModel(Base):
    __tablename__ = "categoria"

    id = Column(Integer, primary_key=True)
    name = Column("nombreCategoria", String(100), nullable=False)
    description = Column("descripcion", String(255))

    # 1 activa, 0 inactiva
    status = Column("estado", Integer, nullable=False, default=1)

    products = relationship("ProductModel", back_populates="category")
