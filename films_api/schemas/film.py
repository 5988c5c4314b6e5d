from marshmallow import fields

from films_api.engine import PERSON_ROLES
from films_api.models.film import Film
from films_api.schemas import ma

class FilmSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Film

    id = fields.Int(dump_only=True)
    year = fields.Date()


# projections, field order is the key order in the response
class IdTitleSchema(ma.Schema):
    id = fields.Int()
    title = fields.String()

class TitleSchema(ma.Schema):
    title = fields.String()

class TitleLengthSchema(ma.Schema):
    title = fields.String()
    length = fields.Int()

class YearTitleSchema(ma.Schema):
    year = fields.Date()
    title = fields.String()

def person_name_schema(role):
    # {"actor": "Allen, Woody"}, the key is the role itself
    schema_class = ma.Schema.from_dict(
        {role: fields.String(attribute="name")}, name=f"{role.capitalize()}NameSchema"
    )
    return schema_class(many=True)


film_schema = FilmSchema()
id_titles_schema = IdTitleSchema(many=True)
titles_schema = TitleSchema(many=True)
title_lengths_schema = TitleLengthSchema(many=True)
year_titles_schema = YearTitleSchema(many=True)
person_names_schemas = {role: person_name_schema(role) for role in PERSON_ROLES}
