"""
Endpoint paths, relative to ``ClientConfig.base_url``.
"""

URIS = {
    # image recognition
    "porn": "vision/vision_porn",
    "terrorism": "image/image_terrorism",
    "scener": "vision/vision_scener",
    "objectr": "vision/vision_objectr",
    "imagetag": "image/image_tag",
    "imgidentify": "vision/vision_imgidentify",
    "imgtotext": "vision/vision_imgtotext",
    "imagefuzzy": "image/image_fuzzy",
    "imagefood": "image/image_food",
    # ocr
    "idcardocr": "ocr/ocr_idcardocr",
    "bcocr": "ocr/ocr_bcocr",
    "driverlicenseocr": "ocr/ocr_driverlicenseocr",
    "bizlicenseocr": "ocr/ocr_bizlicenseocr",
    "creditcardocr": "ocr/ocr_creditcardocr",
    "generalocr": "ocr/ocr_generalocr",
    "plateocr": "ocr/ocr_plateocr",
    "handwritingocr": "ocr/ocr_handwritingocr",
    # image special effects
    "facecosmetic": "ptu/ptu_facecosmetic",
    "facedecoration": "ptu/ptu_facedecoration",
    "ptuimgfilter": "ptu/ptu_imgfilter",
    "visionimgfilter": "vision/vision_imgfilter",
    "facemerge": "ptu/ptu_facemerge",
    "facesticker": "ptu/ptu_facesticker",
    "faceage": "ptu/ptu_faceage",
    # nlp
    "wordseg": "nlp/nlp_wordseg",
    "wordpos": "nlp/nlp_wordpos",
    "wordner": "nlp/nlp_wordner",
    "wordsyn": "nlp/nlp_wordsyn",
    "wordcom": "nlp/nlp_wordcom",
    "textpolar": "nlp/nlp_textpolar",
    "textchat": "nlp/nlp_textchat",
    "texttranslate": "nlp/nlp_texttranslate",
    # speech
    "tts": "aai/aai_tts",
    "tta": "aai/aai_tta",
    "asr": "aai/aai_asr",
    "asrs": "aai/aai_asrs",
}
