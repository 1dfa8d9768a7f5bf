from sqlalchemy import Column, Text, Boolean, TIMESTAMP, ForeignKey, JSON, Index, func

from .base import Base


class Branch(Base):
    __tablename__ = 'branch'

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, index=True)
    company_name = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())


class Role(Base):
    """
    RBAC role. ``permissions`` is a JSON list of
    ``{"moduleId": str, "actions": [str, ...]}`` entries, validated into
    enums when converted to a domain Role.
    """
    __tablename__ = 'role'

    id = Column(Text, primary_key=True)
    name = Column(Text, nullable=False, index=True)
    description = Column(Text, nullable=False, default='')
    permissions = Column(JSON, nullable=False, default=list)
    is_system = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())


class AdminUser(Base):
    """
    Console account. ``role_id`` is deliberately not a foreign key:
    deleting a role leaves its users with an unresolvable role id.
    """
    __tablename__ = 'admin_user'

    id = Column(Text, primary_key=True)
    full_name = Column(Text, nullable=False, default='')
    email = Column(Text, nullable=False, unique=True)
    position = Column(Text, nullable=False, default='')
    phone = Column(Text, nullable=False, default='')
    password_hash = Column(Text, nullable=False)
    role_id = Column(Text, nullable=False)
    branch_id = Column(Text, ForeignKey('branch.id', ondelete='SET NULL'), nullable=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index('idx_admin_user_email', 'email'),
        Index('idx_admin_user_branch', 'branch_id'),
    )
