"""
Developer integration guides, rendered with the caller's API key
"""

from typing import Callable, Dict, Optional

DOCS_URL = "https://docs.fortem.gg"
JS_SDK_REPO = "https://github.com/ForTemLabs/sdk-js"
UNITY_SDK_REPO = "https://github.com/ForTemLabs/fortem-sdk-unity"
UNITY_PACKAGE_URL = f"{UNITY_SDK_REPO}.git?path=Packages/com.fortem.fortem-sdk"


def build_overview_guide(api_key: str) -> str:
    return f"""
# Fortem Developer Integration Guide

Your API key: `{api_key}`

Fortem provides three integration paths depending on your use case:

---

## Option 1: Direct Developer API

Best for: custom backends, server-side integrations, non-game contexts.

**Getting started:**
Use your API key in the Authorization header for every request.

**Base URLs:**
- Testnet: https://testnet-api.fortem.gg
- Mainnet: https://api.fortem.gg

**Key endpoints:**
- `GET  /api/v1/auth/check-wallet?walletAddress={{address}}`: verify a member
- `GET  /api/v1/collections`: list collections
- `POST /api/v1/collections/create/prepare` + `execute`: create a collection
- `GET  /api/v1/items`: list items
- `POST /api/v1/items/mint/prepare` + `execute`: mint items

**Docs:** {DOCS_URL}

---

## Option 2: JS SDK (HTML / Web Games)

Best for: browser-based games, HTML5 games, web apps.

**Installation:**
```bash
npm install @fortemlabs/sdk-js
```

**Quick start:**
```typescript
import {{ createFortemClient }} from "@fortemlabs/sdk-js"

const fortem = createFortemClient({{ apiKey: "{api_key}" }})
```

**Rate limits:** 100 collection requests/day, 1,000 item requests/day

**GitHub:** {JS_SDK_REPO}

---

## Option 3: Unity SDK

Best for: Unity games (minimum Unity 2021.2).

**Installation via Unity Package Manager:**
```
{UNITY_PACKAGE_URL}
```

Use API key: `{api_key}`

**GitHub:** {UNITY_SDK_REPO}
**Docs:** {DOCS_URL}

---

Use `get_developer_guide` with option "1", "2", or "3" to see a focused guide for each path.
""".strip()


def build_direct_api_guide(api_key: str) -> str:
    return f"""
# Option 1: Direct Developer API

Best for: custom backends, server-side integrations, non-game contexts.

## Authentication

Include your API key in every request:
```
Authorization: Bearer {api_key}
```

## Base URLs

| Network  | URL                              |
|----------|----------------------------------|
| Testnet  | https://testnet-api.fortem.gg    |
| Mainnet  | https://api.fortem.gg            |

## Core endpoints

### User verification
```
GET /api/v1/auth/check-wallet?walletAddress={{address}}
```
Returns `{{ exists: boolean, walletAddress: string }}`

### Collections
```
GET  /api/v1/collections              # list
GET  /api/v1/collections/:id/header   # detail
POST /api/v1/collections/create/prepare
POST /api/v1/collections/create/execute
```

### Items
```
GET  /api/v1/items                    # list
GET  /api/v1/items/:id                # detail
POST /api/v1/items/mint/prepare
POST /api/v1/items/mint/execute
PUT  /api/v1/items/image-upload       # IPFS upload
```

### Market
```
GET  /api/v1/kiosks/exists
POST /api/v1/kiosks/create/prepare
POST /api/v1/kiosks/create/execute
POST /api/v1/items/:id/list/prepare
POST /api/v1/items/list/execute
```

## Docs

{DOCS_URL}
""".strip()


def build_js_sdk_guide(api_key: str) -> str:
    return f"""
# Option 2: JS SDK (HTML / Web Games)

Best for: browser-based games, HTML5 games, web apps.

## Installation

```bash
npm install @fortemlabs/sdk-js
# or
yarn add @fortemlabs/sdk-js
pnpm add @fortemlabs/sdk-js
```

## Authentication

```typescript
import {{ createFortemClient }} from "@fortemlabs/sdk-js"

const fortem = createFortemClient({{ apiKey: "{api_key}" }})
```

The client caches the token (5-minute TTL) and refreshes it as needed.

## Key APIs

```typescript
// Verify a game player
const {{ exists }} = await fortem.users.checkWallet("0xPlayerWalletAddress")

// List collections
const collections = await fortem.collections.list()

// Create a collection
await fortem.collections.create({{ name: "Season 1", description: "..." }})

// List items
const items = await fortem.items.list({{ collectionId: 1 }})

// Mint an item
await fortem.items.create({{
  collectionId: 1,
  name: "Gold Sword",
  description: "Rare weapon",
  quantity: 1,
  redeemCode: "GOLDSWORD01",
}})

// Upload an image
await fortem.items.uploadImage(file)
```

## Rate limits

| Resource    | Limit           |
|-------------|-----------------|
| Collections | 100 req / day   |
| Items       | 1,000 req / day |

## Error handling

```typescript
import {{ FortemAuthError, FortemTokenExpiredError }} from "@fortemlabs/sdk-js"

try {{
  await fortem.items.create(...)
}} catch (e) {{
  if (e instanceof FortemAuthError) {{ /* invalid API key */ }}
  if (e instanceof FortemTokenExpiredError) {{ /* auto-refresh failed */ }}
}}
```

## GitHub

{JS_SDK_REPO}
""".strip()


def build_unity_guide(api_key: str) -> str:
    return f"""
# Option 3: Unity SDK

Best for: Unity games (minimum Unity 2021.2).

## Installation

### Via Unity Package Manager (recommended)

1. Open **Window > Package Manager**
2. Click **+** > **Add package from git URL**
3. Paste:
   ```
   {UNITY_PACKAGE_URL}
   ```
4. Click **Add**

To pin a specific version, append a version tag:
```
{UNITY_PACKAGE_URL}#1.0.0
```

## Your API Key

```
{api_key}
```

## Requirements

- Unity 2021.2 or later

## GitHub

{UNITY_SDK_REPO}

## Docs

{DOCS_URL}
""".strip()


GUIDE_BUILDERS: Dict[str, Callable[[str], str]] = {
    "1": build_direct_api_guide,
    "2": build_js_sdk_guide,
    "3": build_unity_guide,
}


def build_guide(api_key: str, option: Optional[str] = None) -> str:
    """Focused guide for option "1", "2" or "3"; the overview otherwise"""
    return GUIDE_BUILDERS.get(option, build_overview_guide)(api_key)
