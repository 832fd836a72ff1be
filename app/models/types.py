from sqlalchemy import BigInteger, Integer

# SQLite only auto-increments INTEGER PRIMARY KEY columns
BigIntPK = BigInteger().with_variant(Integer(), "sqlite")
