# 统一的 SQLAlchemy 声明式基类，所有 ORM 模型都从这里继承，
# 这样 Base.metadata.create_all 能一次性建出全部表。

from sqlalchemy.orm import declarative_base

Base = declarative_base()
