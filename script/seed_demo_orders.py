#!/usr/bin/env python3
"""
Demo Order Script
Walks a table through the whole guest/kitchen flow against a running server

Steps:
1. Reserve the table for a guest
2. Place an order for a menu item
3. Advance the order status until it is served (with a pause per step so a
   watcher started with watch_order_status.py can follow along)
4. Optionally free the table again

Usage: python script/seed_demo_orders.py [table_id] [guest_name] [menu_item_id] [--free]
"""

import asyncio
import sys
from dataclasses import dataclass

import httpx


BASE_URL = 'http://localhost:8000'
STEP_DELAY_SECONDS = 2.0

STATUS_STEPS = ['ORDER_PREPARING', 'ORDER_ON_THEY_WAY_TO_TABLE', 'ORDER_SERVED']


@dataclass
class DemoConfig:
    """Demo run configuration"""
    table_id: int = 3
    guest_name: str = 'Anna'
    menu_item_id: str = '2'
    free_at_end: bool = False


def _parse_args(argv: list[str]) -> DemoConfig:
    positional = [arg for arg in argv if not arg.startswith('--')]
    config = DemoConfig(free_at_end='--free' in argv)
    if len(positional) > 0:
        config.table_id = int(positional[0])
    if len(positional) > 1:
        config.guest_name = positional[1]
    if len(positional) > 2:
        config.menu_item_id = positional[2]
    return config


def _check(step: str, response: httpx.Response) -> dict:
    response.raise_for_status()
    body = response.json()
    if not body.get('success'):
        raise RuntimeError(f'{step} failed: {body.get("error")}')
    print(f'   ✅ {step}')
    return body


async def run_demo(config: DemoConfig) -> None:
    table_url = f'{BASE_URL}/api/table/{config.table_id}'

    async with httpx.AsyncClient(timeout=10.0) as client:
        print(f'🍽️  Reserving table {config.table_id} for {config.guest_name}...')
        _check('reserve', await client.post(f'{table_url}/reserve', json={'name': config.guest_name}))

        print(f'🧾 Ordering menu item {config.menu_item_id}...')
        body = _check(
            'order',
            await client.post(
                f'{table_url}/order',
                json={'name': config.guest_name, 'menu_item_id': config.menu_item_id},
            ),
        )
        print(f'   📦 {body["order"]["item"]["name"]} → {body["order"]["status"]}')

        for status in STATUS_STEPS:
            await asyncio.sleep(STEP_DELAY_SECONDS)
            print(f'👨‍🍳 Status → {status}')
            _check('status', await client.patch(f'{table_url}/order/status', json={'status': status}))

        if config.free_at_end:
            await asyncio.sleep(STEP_DELAY_SECONDS)
            print(f'🧹 Freeing table {config.table_id}...')
            _check('free', await client.post(f'{table_url}/free'))

        table = (await client.get(table_url)).json()
        print(f'📋 Final table state: {table}')


if __name__ == '__main__':
    try:
        asyncio.run(run_demo(_parse_args(sys.argv[1:])))
    except KeyboardInterrupt:
        print('\n🛑 Stopped by user')
    except (httpx.HTTPError, RuntimeError) as e:
        print(f'\n❌ Error: {e}')
        sys.exit(1)
