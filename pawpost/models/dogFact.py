from sqlalchemy import Column, Integer, Text
from pawpost.core.database import Base

class DogFact(Base):
    __tablename__ = "dog_facts"
    id = Column(Integer, primary_key=True, index=True)
    fact = Column(Text, nullable=False)
