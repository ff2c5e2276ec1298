import json


class Templates:
    """Шаблоны статических файлов SDK"""

    axios_client = """import axios, { AxiosInstance, CreateAxiosDefaults } from 'axios';

/**
 * Creates a dedicated axios instance. Every client created by createClient
 * owns its own instance, so several clients can live in one process.
 */
export function createAxiosClient(options: CreateAxiosDefaults = {}): AxiosInstance {
  return axios.create(options);
}

export default createAxiosClient;
"""

    index = """export * from './models';
export * from './createClient';
"""

    tsconfig = """{
  "compilerOptions": {
    "target": "ES6",
    "module": "CommonJS",
    "declaration": true,
    "outDir": "./dist",
    "strict": true,
    "esModuleInterop": true
  },
  "include": ["src/**/*"]
}
"""

    readme_header = """# {name} SDK

This SDK allows you to easily interact with the {name} API using TypeScript.
{description}

## Features

- **Typed Models**: Every schema of the API is available as a TypeScript interface.
- **One Function per Operation**: Each API operation is exposed as an async function.
- **Error Handling**: All API calls return a `data`, `error`, and `isBusy` object to handle responses and errors gracefully.
- **TypeScript Support**: Fully typed for TypeScript users.

## Installation

To use the {name} SDK, you first need to install it:

```bash
npm install {package_name}
```

## Usage

First, initialize the {name} SDK with your API key:

```typescript
import {{ createClient }} from '{package_name}';

const {client_var} = createClient({{ apiKey: 'your-api-key-here' }});
```
"""

    readme_usage_intro = (
        "You can now use the SDK to interact with your API. "
        "Here's how you can use the functions available in the SDK:"
    )

    readme_method = """### {operation_id}

**Description:** {summary}

**Example:**

```typescript
const {{ data, error }} = await {client_var}.{operation_id}({arguments});

if (error) {{
  console.error('Error:', error);
}} else {{
  console.log('Data:', data);
}}
```
"""

    readme_error_handling = """## Error Handling

Each method in the {name} SDK returns an object containing:
- `data`: The response data from the API if successful.
- `error`: An error message if the request fails.
- `isBusy`: A boolean indicating whether the request is still in progress.

This allows you to handle API responses and errors effectively without worrying about exceptions being thrown.
"""

    readme_footer = """## Contributing

If you would like to contribute to the {name} SDK, feel free to fork the repository, make your changes, and submit a pull request. We welcome all contributions!

## License

This project is licensed under the MIT License.
"""


templates = Templates()


def generate_package_json(package_name: str, version: str, description: str) -> str:
    """package.json сгенерированного SDK"""
    return (
        json.dumps(
            {
                "name": package_name,
                "version": version,
                "description": description,
                "repository": "",
                "homepage": "",
                "main": "dist/index.js",
                "types": "dist/index.d.ts",
                "files": ["dist"],
                "scripts": {
                    "build": "tsc",
                    "format": "prettier --write .",
                    "pub": "npm publish --access public",
                    "prepublishOnly": "npm run build",
                },
                "keywords": [],
                "author": "",
                "license": "ISC",
                "devDependencies": {
                    "prettier": "^3.3.3",
                    "typescript": "^5.5.4",
                },
                "dependencies": {
                    "axios": "^1.7.3",
                },
            },
            indent=2,
            ensure_ascii=False,
        )
        + "\n"
    )
