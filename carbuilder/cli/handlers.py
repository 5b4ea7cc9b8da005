"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
import click
from tabulate import tabulate

from carbuilder import __version__
from carbuilder.commons.log_helper import get_logger, get_user_logger
from carbuilder.conf import CONF_PATH_ENV
from carbuilder.conf.processor import ConfigHolder
from carbuilder.cli.constants import (OK_RETURN_CODE, ASSEMBLE_ACTION,
                                      PRESET_ACTION, PRESETS_ACTION,
                                      DEMO_ACTION)
from carbuilder.cli.decorators import return_code_manager
from carbuilder.cli.helper import verbose_option, tabulate_cars
from carbuilder.patterns import CarBuilder, CarDirector

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


@click.group(name='carbuilder')
@return_code_manager
@click.option('--config-path', '-c', envvar=CONF_PATH_ENV,
              type=click.Path(exists=True, file_okay=False),
              help='Folder containing carbuilder.yml with additional '
                   f'recipes. Defaults to ${CONF_PATH_ENV}')
@click.version_option(version=__version__)
@click.pass_context
def carbuilder(ctx, config_path):
    """Assembles cars step by step using the builder pattern"""
    recipes = []
    if config_path:
        config = ConfigHolder(config_path)
        _LOG.info(f'Configuration used: {config.config_path}')
        recipes = config.recipes
    ctx.obj = {'director': CarDirector(recipes=recipes)}


@carbuilder.command(name=ASSEMBLE_ACTION)
@return_code_manager
@click.option('--body', '-b', help='Body of the car')
@click.option('--engine', '-e', help='Engine of the car')
@click.option('--wheels', '-w', help='Wheels of the car')
@verbose_option
def assemble(body, engine, wheels):
    """Assembles a single car out of the given parts"""
    builder = CarBuilder()
    for setter, value in ((builder.set_body, body),
                          (builder.set_engine, engine),
                          (builder.set_wheels, wheels)):
        if value is not None:
            setter(value)
    car = builder.build()
    if car.missing_parts:
        USER_LOG.warning(f'The car has no {", ".join(car.missing_parts)}')
    click.echo(tabulate_cars({ASSEMBLE_ACTION: car}))
    return OK_RETURN_CODE


@carbuilder.command(name=PRESET_ACTION)
@return_code_manager
@click.argument('name')
@verbose_option
@click.pass_context
def preset(ctx, name):
    """Builds a car out of the named director recipe"""
    director = ctx.obj['director']
    car = director.build_configuration(name, CarBuilder())
    click.echo(tabulate_cars({name.lower(): car}))
    return OK_RETURN_CODE


@carbuilder.command(name=PRESETS_ACTION)
@return_code_manager
@verbose_option
@click.pass_context
def presets(ctx):
    """Lists the recipes known to the director"""
    director = ctx.obj['director']
    click.echo(tabulate([recipe._asdict() for recipe in director.recipes],
                        headers='keys'))
    return OK_RETURN_CODE


@carbuilder.command(name=DEMO_ACTION)
@return_code_manager
@verbose_option
@click.pass_context
def demo(ctx):
    """Walks through manual, directed and shared-builder assembly"""
    click.echo('Cars assembled manually, one builder per car:')
    ferrari = CarBuilder() \
        .set_body('Ferrari') \
        .set_engine('V8') \
        .set_wheels('Michelin') \
        .build()
    porsche = CarBuilder() \
        .set_body('Porsche') \
        .set_engine('V6') \
        .set_wheels('Continental') \
        .build()
    tesla = CarBuilder() \
        .set_body('Tesla') \
        .set_engine('Electric') \
        .set_wheels('Michelin') \
        .build()
    click.echo(tabulate_cars({'ferrari': ferrari, 'porsche': porsche,
                              'tesla': tesla}))

    click.echo('\nCars assembled by the director:')
    director = ctx.obj['director']
    click.echo(tabulate_cars({
        'sport': director.build_sport_configuration(CarBuilder()),
        'suv': director.build_suv_configuration(CarBuilder())
    }))

    # one builder owns one car: every build hands out the same object
    click.echo('\nCars assembled by a single shared builder:')
    builder = CarBuilder()
    car1 = builder.set_body('Ferrari').build()
    car2 = builder.set_body('Tesla').build()
    car3 = builder.set_body('Porsche').build()
    click.echo(tabulate_cars({'car1': car1, 'car2': car2, 'car3': car3}))
    click.echo(f'Same car: {car1 is car2 and car2 is car3}')
    return OK_RETURN_CODE
