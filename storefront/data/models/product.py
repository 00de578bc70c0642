#storefront/data/models/product.py
from sqlalchemy import Column, Integer, ForeignKey, String, Date, Numeric
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "producto"

    id = Column(Integer, primary_key=True)
    name = Column("nombreProducto", String(100), nullable=False)
    category_id = Column("idCategoria", Integer, ForeignKey("categoria.id"), nullable=False)

    stock = Column(Integer, nullable=False, default=0)
    price = Column("precio", Numeric(10, 2), nullable=False)
    description = Column("descripcion", String(255))
    code = Column("codigo", String(50), nullable=False)

    elaboration_date = Column("fecha_elaboracion", Date, nullable=False)
    expiry_date = Column("fecha_caducidad", Date, nullable=False)

    # 1 activo, 0 desactivado
    condition = Column("condicion", Integer, nullable=False, default=1)

    category = relationship("CategoryModel", back_populates="products")
