"""
Modelos de Base de Datos

Mapea las tablas del almacén (esquema externo) usando SQLAlchemy:
customers, invoices y revenue.
"""

from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship
import uuid

from src.database.connection import Base


class Customer(Base):
    """Modelo de Cliente"""
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False)

    # Relaciones
    invoices = relationship("Invoice", back_populates="customer")

    def __repr__(self):
        return f"<Customer {self.name}>"


class Invoice(Base):
    """
    Modelo de Factura.

    amount se guarda en centavos. status es "pending" o "paid" en la
    práctica, pero la columna no restringe otros valores.
    """
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(
        String(36),
        ForeignKey("customers.id"),
        nullable=False,
        index=True
    )
    amount = Column(Integer, nullable=False)
    status = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)

    # Relaciones
    customer = relationship("Customer", back_populates="invoices")

    def __repr__(self):
        return f"<Invoice {self.id} {self.status}>"


class Revenue(Base):
    """Ingresos mensuales pre-agregados (sólo lectura)"""
    __tablename__ = "revenue"

    month = Column(String(4), primary_key=True)
    revenue = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Revenue {self.month}>"
