from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from pawpost.core.database import Base

class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    # bcrypt hash token, never the plaintext
    password = Column(String(255), nullable=False)
    posts = relationship("Post", back_populates="author", passive_deletes=True)
