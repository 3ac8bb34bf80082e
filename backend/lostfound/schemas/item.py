from marshmallow import Schema, fields, validate, pre_load, EXCLUDE


class ItemSchema(Schema):
    """Incoming lost/found report. Accepts camelCase keys from the web client."""

    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    type = fields.Str(required=True, validate=validate.OneOf(["lost", "found"]))
    category = fields.Str(required=True, validate=validate.Length(min=1, max=80))
    title = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(required=True, validate=validate.Length(min=1))
    location = fields.Str(load_default=None, validate=validate.Length(max=200))
    occurred_on = fields.Date(load_default=None, data_key="occurredOn")
    contact_info = fields.Str(load_default=None, data_key="contactInfo", validate=validate.Length(max=255))
    owner_user_id = fields.Int(load_default=None, data_key="ownerId")
    status = fields.Str(dump_only=True)
    tags = fields.List(fields.Str(), dump_only=True)

    @pre_load
    def strip_strings(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        out = dict(data)
        for key in ("type", "category", "title", "description", "location", "contactInfo"):
            value = out.get(key)
            if not isinstance(value, str):
                continue
            value = value.strip()
            if not value and key in ("location", "contactInfo"):
                value = None
            out[key] = value
        if isinstance(out.get("type"), str):
            out["type"] = out["type"].lower()
        return out


class ItemStatusSchema(Schema):
    status = fields.Str(required=True, validate=validate.OneOf(["active", "recovered", "removed"]))
