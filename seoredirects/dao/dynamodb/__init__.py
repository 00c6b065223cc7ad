from seoredirects.dao.dynamodb.redirect_dynamodb_dao import RedirectDynamoDBDAO


__all__ = ['RedirectDynamoDBDAO']
