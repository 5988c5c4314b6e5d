from films_api.models import db

class Film(db.Model):
    __tablename__ = "film"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    year = db.Column(db.Date)  # only the year part is used for decade/century buckets
    length = db.Column(db.Integer)  # minutes
    subject = db.Column(db.String(64))

    # "LastName, FirstName", empty string when nobody is credited
    actor = db.Column(db.String(128), default="")
    actress = db.Column(db.String(128), default="")
    director = db.Column(db.String(128), default="")

    popularity = db.Column(db.Integer)
    awards = db.Column(db.String(8))

    def __repr__(self):
        return f"<Film {self.id} {self.title!r}>"
