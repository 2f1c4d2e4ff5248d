import sqlite3
import sys

DB = sys.argv[1] if len(sys.argv) > 1 else "munch.db"
LIMIT = int(sys.argv[2]) if len(sys.argv) > 2 else 20

conn = sqlite3.connect(DB)
cur = conn.cursor()

print("=== Cart ===")
cur.execute("SELECT id, name, price_cents, quantity FROM cart ORDER BY id")
rows = cur.fetchall()
for r in rows:
    print({"id": r[0], "name": r[1], "price_cents": r[2], "quantity": r[3]})
print("total_cents:", sum(r[2] * r[3] for r in rows))

print("\n=== Recent Orders ===")
cur.execute(
    "SELECT id, items, total_cents, user_name, user_address FROM orders ORDER BY id DESC LIMIT ?",
    (LIMIT,),
)
for r in cur.fetchall():
    print(r)

print("\n=== Foods ===")
cur.execute("SELECT id, name, price_cents FROM foods ORDER BY id")
for r in cur.fetchall():
    print(r)

conn.close()
