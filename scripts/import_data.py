from pathlib import Path

from shelf_api.crud import sql_collections
from shelf_api.db import SessionLocal, init_db
from shelf_api.seed import seed_collections


def main():
    init_db()
    data_dir = Path(__file__).resolve().parents[1] / 'data'
    if not data_dir.exists():
        print('data/ directory not found')
        return
    counts = seed_collections(sql_collections(SessionLocal), data_dir)
    for name, added in counts.items():
        print(f'Imported {added} {name}')


if __name__ == '__main__':
    main()
