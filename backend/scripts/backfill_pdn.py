from app.core.config import settings
from app.db.session import create_db_engine
from app.db.store import Store
from app.services.games import backfill_missing_pdn


def main():
    store = Store(create_db_engine(settings))
    try:
        filled = backfill_missing_pdn(store)
        print(f"ok: pdn cached for {filled} games")
    finally:
        store.dispose()


if __name__ == "__main__":
    main()
