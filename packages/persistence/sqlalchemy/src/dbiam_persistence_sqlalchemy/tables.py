"""Tables backing the domain aggregates."""

from __future__ import annotations

from datetime import date
from typing import Any

from sqlalchemy import Boolean, Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .core.models import Base, EntityMixin
from .core.types import JSONType


class OrganisationModel(EntityMixin, Base):
    __tablename__ = "organisation"

    kennung: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    namensergaenzung: Mapped[str | None] = mapped_column(String(255), nullable=True)
    kuerzel: Mapped[str | None] = mapped_column(String(64), nullable=True)
    typ: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    administriert_von: Mapped[str | None] = mapped_column(
        String(36), nullable=True, index=True
    )
    zugehoerig_zu: Mapped[str | None] = mapped_column(String(36), nullable=True)


class PersonModel(EntityMixin, Base):
    __tablename__ = "person"

    referrer: Mapped[str | None] = mapped_column(String(255), nullable=True, unique=True)
    vorname: Mapped[str | None] = mapped_column(String(64), nullable=True)
    familienname: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    geburtsdatum: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_information_blocked: Mapped[bool] = mapped_column(Boolean, default=False)


class RolleModel(EntityMixin, Base):
    __tablename__ = "rolle"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    administered_by_schulstrukturknoten: Mapped[str | None] = mapped_column(
        String(36), nullable=True
    )
    rollenart: Mapped[str | None] = mapped_column(String(32), nullable=True)
    merkmale: Mapped[list[Any]] = mapped_column(JSONType, default=list)
    systemrechte: Mapped[list[Any]] = mapped_column(JSONType, default=list)


class PersonenkontextModel(EntityMixin, Base):
    __tablename__ = "personenkontext"
    __table_args__ = (
        UniqueConstraint("person_id", "organisation_id", "rolle_id"),
    )

    person_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("person.id", ondelete="CASCADE"), index=True
    )
    organisation_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("organisation.id"), index=True
    )
    rolle_id: Mapped[str] = mapped_column(String(36), ForeignKey("rolle.id"), index=True)
