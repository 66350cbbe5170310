"""Demonstrate priority ordering and batched pops.

# Difficulty: beginner
"""

from bucketq import PriorityBucketStore

store = PriorityBucketStore()

# Push payloads with different priorities
for label, level in [("low", 10), ("medium", 50), ("HIGH", 90), ("medium-2", 50)]:
    store.push(level, label.encode())

print(f"Highest waiting priority: {store.max_priority()}")

# Pop in batches of two until nothing is left
while True:
    batch = store.pop(2)
    if batch is None:
        break
    print([f"{item.priority}:{item.payload.decode()}" for item in batch])
