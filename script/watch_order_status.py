#!/usr/bin/env python3
"""
Order status watcher
Prints the live order updates of one table (Ctrl+C to stop)

Usage: python script/watch_order_status.py [table_id] [base_url]
"""

import asyncio
import sys

import httpx
import orjson


async def watch_order_status(table_id: int, base_url: str) -> None:
    url = f'{base_url}/api/order-status'

    print(f'🔗 Connecting to SSE stream: {url}?tableId={table_id}')
    print('=' * 80)

    async with httpx.AsyncClient(timeout=None) as client:
        async with client.stream('GET', url, params={'tableId': table_id}) as response:
            if response.status_code != 200:
                await response.aread()
                print(f'❌ Stream refused ({response.status_code}): {response.text}')
                return

            print(f'✅ Connected! Status: {response.status_code}')
            print('=' * 80)

            message_count = 0
            async for line in response.aiter_lines():
                if line.startswith(':'):
                    print('💓 heartbeat')
                    continue
                if not line.startswith('data: '):
                    continue

                message_count += 1
                try:
                    order = orjson.loads(line[6:])
                except orjson.JSONDecodeError:
                    print(f'⚠️  Message #{message_count}: Invalid JSON')
                    continue
                print(
                    f'📦 #{message_count} table={order["tableId"]} guest={order["name"]} '
                    f'item={order["item"]["name"]} status={order["status"]}'
                )


if __name__ == '__main__':
    table_id = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    base_url = sys.argv[2] if len(sys.argv) > 2 else 'http://localhost:8000'
    try:
        asyncio.run(watch_order_status(table_id, base_url))
    except KeyboardInterrupt:
        print('\n🛑 Stopped by user')
