from sqlalchemy import (
    Column, Integer, BigInteger, String, Text, DateTime, Float, ForeignKey, CheckConstraint
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class Listable:
    """
    Capability mixin for entities served by the generic listing engine.
    
    Subclasses declare which columns may be sorted on and which foreign keys
    may be used as equality filters.
    """
    SORTABLE_FIELDS = ()
    FILTERABLE_FIELDS = ()
    
    @classmethod
    def column_for(cls, field: str):
        return getattr(cls, field)


class Location(Base):
    __tablename__ = 'locations'
    
    id = Column(Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False, unique=True)
    
    # Metadata
    inserted_at = Column(DateTime, default=func.now())
    
    developers = relationship("Developer", back_populates="location")
    
    def __repr__(self):
        return f"<Location(id={self.id}, slug='{self.slug}')>"


class Developer(Listable, Base):
    __tablename__ = 'developers'
    
    SORTABLE_FIELDS = ('name', 'username', 'score', 'total_starred', 'followers', 'github_created_at')
    FILTERABLE_FIELDS = ('location_id',)
    
    id = Column(Integer, primary_key=True)
    github_id = Column(BigInteger, unique=True, nullable=True)
    name = Column(String(255))
    username = Column(String(255), nullable=False, unique=True, index=True)
    avatar_url = Column(Text)
    bio = Column(Text)
    company = Column(String(255))
    github_location = Column(String(255))
    
    # Popularity stats, computed out-of-band
    score = Column(Float, nullable=False, default=0.0, index=True)
    total_starred = Column(Integer, nullable=False, default=0)
    followers = Column(Integer, nullable=False, default=0)
    
    location_id = Column(Integer, ForeignKey('locations.id'), nullable=True, index=True)
    
    # Metadata
    github_created_at = Column(DateTime, nullable=False)
    inserted_at = Column(DateTime, default=func.now())
    
    location = relationship("Location", back_populates="developers")
    repositories = relationship("Repository", back_populates="developer")
    
    __table_args__ = (
        CheckConstraint('total_starred >= 0', name='check_total_starred_non_negative'),
        CheckConstraint('followers >= 0', name='check_followers_non_negative'),
    )
    
    def __repr__(self):
        return f"<Developer(id={self.id}, username='{self.username}', score={self.score})>"


class Repository(Listable, Base):
    __tablename__ = 'repositories'
    
    SORTABLE_FIELDS = ('name', 'score', 'total_stars', 'total_forks', 'github_created_at')
    FILTERABLE_FIELDS = ('developer_id',)
    
    id = Column(Integer, primary_key=True)
    github_id = Column(BigInteger, unique=True, nullable=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    
    score = Column(Float, nullable=False, default=0.0)
    total_stars = Column(Integer, nullable=False, default=0)
    total_forks = Column(Integer, nullable=False, default=0)
    
    developer_id = Column(Integer, ForeignKey('developers.id'), nullable=False, index=True)
    
    # Metadata
    github_created_at = Column(DateTime)
    inserted_at = Column(DateTime, default=func.now())
    
    developer = relationship("Developer", back_populates="repositories")
    
    def __repr__(self):
        return f"<Repository(id={self.id}, name='{self.name}', developer_id={self.developer_id})>"
