"""
Persistance relationnelle via SQLModel.

- database : creation de l'engine et des tables
- models : tables movies et reviews
- repositories : implementations asynchrones des ports repository
"""
