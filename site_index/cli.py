# === FILE: site_index/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SiteIndex через командную строку.

Команды:
  scan      Просканировать сайт и вывести/сохранить индекс сайта
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда scan:
  HOMEPAGE_URL        Стартовая страница (или переменная окружения HOMEPAGE_URL)
  --output PATH       Сохранить HTML-отчёт в файл (или переменная окружения OUTPUT_FILE)
  --json PATH         Дополнительно сохранить JSON-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2

Дополнительно:
  --version, -v       Показать версию SiteIndex

Пример:
  siteindex scan http://example.com/index.html --output siteindex.html
"""
import sys
from pathlib import Path

import click

from site_index import __version__
from site_index.config import ScannerConfig, load_config
from site_index.engine import Engine
from site_index.logger import configure, logger

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteIndex, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteIndex CLI."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('scan', context_settings=CONTEXT_SETTINGS)
@click.argument('homepage_url', required=False, envvar='HOMEPAGE_URL')
@click.option(
    '--output', '-o', 'output_file',
    default=None,
    envvar='OUTPUT_FILE',
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном report.html.j2'
)
@click.pass_context
def scan(ctx, homepage_url, output_file, json_output, template_dir):
    """Просканировать сайт и сгенерировать индекс."""
    cfg = ctx.obj['config']
    if homepage_url:
        try:
            cfg = ScannerConfig(**{**cfg.model_dump(), 'homepage_url': homepage_url})
        except ValueError as e:
            print_error(f'Некорректный URL стартовой страницы: {e}')
    homepage_url = cfg.homepage_url
    if not homepage_url:
        print_error('Не задан URL стартовой страницы: укажите HOMEPAGE_URL или homepage_url в конфиге')
    output_file = output_file or cfg.output_file

    click.echo(f'Starting scan: {homepage_url}', err=True)
    try:
        text = Engine(cfg).run_scanner(
            homepage_url,
            output_file=output_file,
            template_dir=template_dir,
            json_file=json_output,
        )
    except Exception as e:
        logger.warning('An unexpected problem occurred during processing: %s', e, exc_info=True)
        print_error(f'Ошибка при сканировании: {e}')

    if output_file:
        click.echo(f'HTML report: {output_file}')
    else:
        click.echo(text)
    if json_output:
        click.echo(f'JSON report: {json_output}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
