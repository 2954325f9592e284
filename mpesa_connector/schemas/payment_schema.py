from marshmallow import Schema, fields, validate, validates, post_load, ValidationError, EXCLUDE

from mpesa_connector.models import PaymentRequest

_NON_NEGATIVE = validate.Range(min=0, error='Must not be negative')


class BuyGoodsRequestSchema(Schema):
    """Inbound buy goods request, Daraja field names on the wire"""

    class Meta:
        unknown = EXCLUDE

    business_short_code = fields.Int(required=True, strict=True, validate=_NON_NEGATIVE,
                                     data_key='BusinessShortCode')
    amount = fields.Decimal(required=True, data_key='Amount')
    party_a = fields.Int(required=True, strict=True, validate=_NON_NEGATIVE, data_key='PartyA')
    party_b = fields.Int(required=True, strict=True, validate=_NON_NEGATIVE, data_key='PartyB')
    phone_number = fields.Int(required=True, strict=True, validate=_NON_NEGATIVE, data_key='PhoneNumber')
    callback_url = fields.Url(required=True, data_key='CallBackURL')
    account_reference = fields.Str(required=True, data_key='AccountReference')
    transaction_desc = fields.Str(required=True, data_key='TransactionDesc')

    @validates('amount')
    def validate_amount(self, value, **kwargs):
        if value <= 0:
            raise ValidationError('Amount must be greater than 0')

    @post_load
    def make_request(self, data, **kwargs):
        return PaymentRequest(**data)


class EnrichedPaymentRequestSchema(Schema):
    """Outbound payload sent to the Daraja buy goods endpoint"""
    business_short_code = fields.Int(data_key='BusinessShortCode')
    password = fields.Str(data_key='Password')
    timestamp = fields.Int(data_key='Timestamp')
    transaction_type = fields.Str(data_key='TransactionType')
    amount = fields.Method('dump_amount', data_key='Amount')
    party_a = fields.Int(data_key='PartyA')
    party_b = fields.Int(data_key='PartyB')
    phone_number = fields.Int(data_key='PhoneNumber')
    callback_url = fields.Str(data_key='CallBackURL')
    account_reference = fields.Str(data_key='AccountReference')
    transaction_desc = fields.Str(data_key='TransactionDesc')

    def dump_amount(self, obj):
        # whole amounts go out as JSON integers
        if obj.amount == obj.amount.to_integral_value():
            return int(obj.amount)
        return float(obj.amount)
