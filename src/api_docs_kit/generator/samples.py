"""Code sample generator: adds ``x-codeSamples`` to every operation.

Each target language is one :class:`SampleTarget` record: its naming
convention, how it spells literals, and a template function. All templates
render from the same :class:`SampleContext`, built once per operation.
"""

import json
import re
from collections.abc import Callable
from typing import Any

import click
from pydantic import BaseModel

from api_docs_kit.config import DocsConfig
from api_docs_kit.parser.base import CodeSample, Operation
from api_docs_kit.parser.openapi import dump_document, iter_operation_nodes, load_document, parse_operation

from .examples import example_path, example_value, query_string, request_body_example
from .literals import (
    CSHARP_LITERAL,
    GO_LITERAL,
    JAVA_LITERAL,
    JSON_LITERAL,
    PHP_LITERAL,
    PYTHON_LITERAL,
    RUBY_LITERAL,
    LiteralStyle,
    render_literal,
)
from .naming import DEFAULT_METHOD, api_class_name, camel_case, camelize, pascal_case, snake_case

CODE_SAMPLES_KEY = "x-codeSamples"
LEGACY_CODE_SAMPLES_KEY = "x-code-samples"


class SdkNames(BaseModel):
    """Package and module names of the per-language SDKs."""

    node: str
    python: str
    go: str
    go_alias: str
    ruby_gem: str
    ruby_module: str
    php: str
    java: str
    csharp: str

    @classmethod
    def for_sdk(cls, name: str) -> "SdkNames":
        """Derive every SDK name from one brand name, e.g. ``widgetic``."""
        words = [w for w in re.split(r"[^0-9A-Za-z]+", name) if w]
        slug = "-".join(w.lower() for w in words)
        ident = "".join(w.lower() for w in words)
        title = "".join(w[:1].upper() + w[1:] for w in words)
        return cls(
            node=f"@{slug}/api-sdk",
            python=f"{slug.replace('-', '_')}_api",
            go=f"github.com/{slug}/{slug}-go",
            go_alias=ident,
            ruby_gem=f"{slug}-api",
            ruby_module=f"{title}Api",
            php=f"{title}\\Api",
            java=f"com.{ident}.api",
            csharp=f"{title}.Api",
        )


class SampleContext(BaseModel):
    """Everything the templates need to know about one operation."""

    http_method: str
    url: str
    base_url: str
    operation_id: str
    api_class: str
    path_params: list[tuple[str, str]] = []
    body: Any = None
    sdk: SdkNames


class SampleTarget(BaseModel):
    """One target language of the generated samples."""

    lang: str
    label: str
    naming: Callable[[str], str] = camel_case
    literal: LiteralStyle = JSON_LITERAL
    render: Callable[..., str]  # (target, ctx) -> source

    def method_name(self, ctx: SampleContext) -> str:
        return self.naming(ctx.operation_id)

    def literal_of(self, value: Any, indent: str = "") -> str:
        return render_literal(value, self.literal, indent)

    def sample(self, ctx: SampleContext) -> CodeSample:
        return CodeSample(lang=self.lang, label=self.label, source=self.render(self, ctx))


# -- templates ----------------------------------------------------------------


def _render_curl(target: SampleTarget, ctx: SampleContext) -> str:
    lines = [
        f"curl -X {ctx.http_method} '{ctx.url}'",
        "  -H 'Authorization: Bearer YOUR_API_KEY'",
    ]
    if ctx.body is not None:
        payload = json.dumps(ctx.body, indent=2, ensure_ascii=False).replace("'", "'\\''")
        lines.append("  -H 'Content-Type: application/json'")
        lines.append(f"  -d '{payload}'")
    return " \\\n".join(lines)


def _render_node(target: SampleTarget, ctx: SampleContext) -> str:
    method = target.method_name(ctx)
    args: dict[str, Any] = {camelize(name): value for name, value in ctx.path_params}
    if ctx.body is not None:
        args[f"{method}Request"] = ctx.body
    call_args = target.literal_of(args, indent="  ") if args else ""

    return (
        f"import {{ {ctx.api_class} }} from '{ctx.sdk.node}';\n\n"
        f"const api = new {ctx.api_class}('YOUR_API_KEY');\n\n"
        "try {\n"
        f"  const result = await api.{method}({call_args});\n"
        "  console.log(result);\n"
        "} catch (error) {\n"
        "  console.error('Error:', error.message);\n"
        "}"
    )


def _render_python(target: SampleTarget, ctx: SampleContext) -> str:
    pkg = ctx.sdk.python
    args = [
        f"{snake_case(name).replace('-', '_')}={target.literal_of(value)}"
        for name, value in ctx.path_params
    ]
    if ctx.body is not None:
        args.append(f"body={target.literal_of(ctx.body, indent='        ')}")

    return (
        f"import {pkg}\n"
        f"from {pkg}.rest import ApiException\n\n"
        f"configuration = {pkg}.Configuration(\n"
        f'    host="{ctx.base_url}",\n'
        '    api_key={"Authorization": "Bearer YOUR_API_KEY"}\n'
        ")\n\n"
        f"with {pkg}.ApiClient(configuration) as api_client:\n"
        f"    api = {pkg}.{ctx.api_class}(api_client)\n"
        "    try:\n"
        f"        result = api.{target.method_name(ctx)}({', '.join(args)})\n"
        "        print(result)\n"
        "    except ApiException as e:\n"
        '        print(f"Error: {e}")'
    )


def _render_go(target: SampleTarget, ctx: SampleContext) -> str:
    alias = ctx.sdk.go_alias
    service = ctx.api_class[:-3] + "API" if ctx.api_class.endswith("Api") else ctx.api_class
    args = ["context.Background()", *(target.literal_of(v) for _, v in ctx.path_params)]
    request = f"client.{service}.{target.method_name(ctx)}({', '.join(args)})"

    lines = [
        "package main",
        "",
        "import (",
        '    "context"',
        '    "fmt"',
        f'    {alias} "{ctx.sdk.go}"',
        ")",
        "",
        "func main() {",
        f"    cfg := {alias}.NewConfiguration()",
        '    cfg.AddDefaultHeader("Authorization", "Bearer YOUR_API_KEY")',
        f"    client := {alias}.NewAPIClient(cfg)",
        "",
    ]
    if ctx.body is not None:
        lines.append(f"    body := {target.literal_of(ctx.body, indent='    ')}")
        request += ".Body(body)"
    lines += [
        f"    result, _, err := {request}.Execute()",
        "    if err != nil {",
        '        fmt.Printf("Error: %v\\n", err)',
        "        return",
        "    }",
        '    fmt.Printf("Result: %v\\n", result)',
        "}",
    ]
    return "\n".join(lines)


def _render_ruby(target: SampleTarget, ctx: SampleContext) -> str:
    module = ctx.sdk.ruby_module
    args = [target.literal_of(v) for _, v in ctx.path_params]
    body = ""
    if ctx.body is not None:
        body = f"body = {target.literal_of(ctx.body)}\n\n"
        args.append("body")

    return (
        f"require '{ctx.sdk.ruby_gem}'\n\n"
        f"{module}.configure do |config|\n"
        "  config.api_key['Authorization'] = 'Bearer YOUR_API_KEY'\n"
        f"  config.host = '{ctx.base_url}'\n"
        "end\n\n"
        f"api = {module}::{ctx.api_class}.new\n\n"
        f"{body}"
        "begin\n"
        f"  result = api.{target.method_name(ctx)}({', '.join(args)})\n"
        "  p result\n"
        f"rescue {module}::ApiError => e\n"
        '  puts "Error: #{e}"\n'
        "end"
    )


def _render_php(target: SampleTarget, ctx: SampleContext) -> str:
    ns = ctx.sdk.php
    args = [target.literal_of(v) for _, v in ctx.path_params]
    body = ""
    if ctx.body is not None:
        body = f"$body = {target.literal_of(ctx.body)};\n\n"
        args.append("$body")

    return (
        "<?php\n"
        "require_once __DIR__ . '/vendor/autoload.php';\n\n"
        f"$config = {ns}\\Configuration::getDefaultConfiguration()\n"
        "    ->setApiKey('Authorization', 'Bearer YOUR_API_KEY')\n"
        f"    ->setHost('{ctx.base_url}');\n\n"
        f"$api = new {ns}\\Api\\{ctx.api_class}(\n"
        "    new GuzzleHttp\\Client(),\n"
        "    $config\n"
        ");\n\n"
        f"{body}"
        "try {\n"
        f"    $result = $api->{target.method_name(ctx)}({', '.join(args)});\n"
        "    print_r($result);\n"
        "} catch (Exception $e) {\n"
        "    echo 'Error: ' . $e->getMessage();\n"
        "}"
    )


def _render_java(target: SampleTarget, ctx: SampleContext) -> str:
    pkg = ctx.sdk.java
    imports = [
        f"import {pkg}.ApiClient;",
        f"import {pkg}.ApiException;",
        f"import {pkg}.Configuration;",
        f"import {pkg}.auth.ApiKeyAuth;",
        f"import {pkg}.api.{ctx.api_class};",
    ]
    args = [target.literal_of(v) for _, v in ctx.path_params]
    body = ""
    if ctx.body is not None:
        imports += ["import java.util.List;", "import java.util.Map;"]
        body = f"        var body = {target.literal_of(ctx.body, indent='        ')};\n"
        args.append("body")

    return (
        "\n".join(imports) + "\n\n"
        "public class Example {\n"
        "    public static void main(String[] args) {\n"
        "        ApiClient client = Configuration.getDefaultApiClient();\n"
        f'        client.setBasePath("{ctx.base_url}");\n\n'
        '        ApiKeyAuth auth = (ApiKeyAuth) client.getAuthentication("Authorization");\n'
        '        auth.setApiKey("Bearer YOUR_API_KEY");\n\n'
        f"        {ctx.api_class} api = new {ctx.api_class}(client);\n"
        f"{body}"
        "        try {\n"
        f"            var result = api.{target.method_name(ctx)}({', '.join(args)});\n"
        "            System.out.println(result);\n"
        "        } catch (ApiException e) {\n"
        '            System.err.println("Error: " + e.getMessage());\n'
        "        }\n"
        "    }\n"
        "}"
    )


def _render_csharp(target: SampleTarget, ctx: SampleContext) -> str:
    ns = ctx.sdk.csharp
    usings = [f"using {ns}.Api;", f"using {ns}.Client;"]
    args = [target.literal_of(v) for _, v in ctx.path_params]
    body = ""
    if ctx.body is not None:
        usings.append("using System.Collections.Generic;")
        body = f"var body = {target.literal_of(ctx.body)};\n\n"
        args.append("body")
    method = pascal_case(target.method_name(ctx)) + "Async"

    return (
        "\n".join(usings) + "\n\n"
        "var config = new Configuration();\n"
        f'config.BasePath = "{ctx.base_url}";\n'
        'config.ApiKey.Add("Authorization", "Bearer YOUR_API_KEY");\n\n'
        f"var api = new {ctx.api_class}(config);\n\n"
        f"{body}"
        "try\n"
        "{\n"
        f"    var result = await api.{method}({', '.join(args)});\n"
        "    Console.WriteLine(result);\n"
        "}\n"
        "catch (ApiException e)\n"
        "{\n"
        '    Console.WriteLine($"Error: {e.Message}");\n'
        "}"
    )


SAMPLE_TARGETS: tuple[SampleTarget, ...] = (
    SampleTarget(lang="curl", label="cURL", render=_render_curl),
    SampleTarget(lang="javascript", label="Node.js", render=_render_node),
    SampleTarget(lang="python", label="Python", naming=snake_case, literal=PYTHON_LITERAL, render=_render_python),
    SampleTarget(lang="go", label="Go", naming=pascal_case, literal=GO_LITERAL, render=_render_go),
    SampleTarget(lang="ruby", label="Ruby", naming=snake_case, literal=RUBY_LITERAL, render=_render_ruby),
    SampleTarget(lang="php", label="PHP", literal=PHP_LITERAL, render=_render_php),
    SampleTarget(lang="java", label="Java", literal=JAVA_LITERAL, render=_render_java),
    SampleTarget(lang="csharp", label="C#", literal=CSHARP_LITERAL, render=_render_csharp),
)


# -- orchestration ------------------------------------------------------------


def build_context(operation: Operation, node: dict, document: dict | None, config: DocsConfig) -> SampleContext:
    return SampleContext(
        http_method=operation.method.upper(),
        url=config.api_base_url + example_path(operation) + query_string(operation),
        base_url=config.api_base_url,
        operation_id=operation.operation_id or DEFAULT_METHOD,
        api_class=api_class_name(operation.tags),
        path_params=[(p.name, example_value(p)) for p in operation.params_in("path")],
        body=request_body_example(operation.method, node, document),
        sdk=SdkNames.for_sdk(config.sdk_name),
    )


def generate_code_samples(
    operation: Operation, node: dict, config: DocsConfig, document: dict | None = None
) -> list[CodeSample]:
    """Render the samples of one operation, one per target, in table order."""
    ctx = build_context(operation, node, document, config)
    return [target.sample(ctx) for target in SAMPLE_TARGETS]


def apply_code_samples(document: dict, config: DocsConfig) -> int:
    """Attach samples to every operation of *document* in place.

    Returns the number of operations updated.
    """
    updated = 0
    for path, method, node, shared in iter_operation_nodes(document):
        operation = parse_operation(path, method, node, shared, document)
        samples = generate_code_samples(operation, node, config, document)
        node[CODE_SAMPLES_KEY] = [s.model_dump() for s in samples]
        node.pop(LEGACY_CODE_SAMPLES_KEY, None)
        updated += 1
    return updated


def generate_samples_file(config: DocsConfig) -> int:
    """Load the published spec, add samples, and write it back."""
    target = config.target_file
    click.echo(f"Loading OpenAPI spec from {target}...")
    document = load_document(target)

    click.echo("Generating code samples...")
    updated = apply_code_samples(document, config)
    click.echo(f"Updated {updated} endpoints with code samples")

    click.echo("Writing updated OpenAPI spec...")
    dump_document(document, target)
    return updated
