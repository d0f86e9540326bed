# Generated by scripts/generate_catalog.py from emoji-test.txt. Do not edit by hand.
#
# Row layout: (name, default sequence, sort order, emoji version, tone declaration)
#
# Tone declaration is one of:
#   None                            no skin tone support
#   "single"                        one modifier after the first code point
#   ("pair", uniform, mixed)        one modifier per person; ``uniform`` (or
#                                   ``None``) is used when both tones match,
#                                   ``{0}``/``{1}`` mark the modifier slots

CATALOG_VERSION = "15.1"

CATALOG_ENTRIES = (
    # smileys-emotion
    ("grinning_face", "\U0001f600", 1, "1.0", None),
    ("grinning_face_with_big_eyes", "\U0001f603", 2, "0.6", None),
    ("grinning_face_with_smiling_eyes", "\U0001f604", 3, "0.6", None),
    ("beaming_face_with_smiling_eyes", "\U0001f601", 4, "0.6", None),
    ("grinning_squinting_face", "\U0001f606", 5, "0.6", None),
    ("grinning_face_with_sweat", "\U0001f605", 6, "0.6", None),
    ("rolling_on_the_floor_laughing", "\U0001f923", 7, "3.0", None),
    ("face_with_tears_of_joy", "\U0001f602", 8, "0.6", None),
    ("slightly_smiling_face", "\U0001f642", 9, "1.0", None),
    ("upside_down_face", "\U0001f643", 10, "1.0", None),
    ("melting_face", "\U0001fae0", 11, "14.0", None),
    ("winking_face", "\U0001f609", 12, "0.6", None),
    ("smiling_face_with_smiling_eyes", "\U0001f60a", 13, "0.6", None),
    ("smiling_face_with_halo", "\U0001f607", 14, "1.0", None),
    ("smiling_face_with_hearts", "\U0001f970", 15, "11.0", None),
    ("smiling_face_with_heart_eyes", "\U0001f60d", 16, "0.6", None),
    ("star_struck", "\U0001f929", 17, "5.0", None),
    ("face_blowing_a_kiss", "\U0001f618", 18, "0.6", None),
    ("kissing_face", "\U0001f617", 19, "1.0", None),
    ("smiling_face", "\u263a\ufe0f", 20, "0.6", None),
    ("kissing_face_with_closed_eyes", "\U0001f61a", 21, "0.6", None),
    ("kissing_face_with_smiling_eyes", "\U0001f619", 22, "1.0", None),
    ("smiling_face_with_tear", "\U0001f972", 23, "13.0", None),
    ("face_savoring_food", "\U0001f60b", 24, "0.6", None),
    ("face_with_tongue", "\U0001f61b", 25, "1.0", None),
    ("winking_face_with_tongue", "\U0001f61c", 26, "0.6", None),
    ("zany_face", "\U0001f92a", 27, "5.0", None),
    ("squinting_face_with_tongue", "\U0001f61d", 28, "0.6", None),
    ("money_mouth_face", "\U0001f911", 29, "1.0", None),
    ("smiling_face_with_open_hands", "\U0001f917", 30, "1.0", None),
    ("face_with_hand_over_mouth", "\U0001f92d", 31, "5.0", None),
    ("face_with_open_eyes_and_hand_over_mouth", "\U0001fae2", 32, "14.0", None),
    ("face_with_peeking_eye", "\U0001fae3", 33, "14.0", None),
    ("shushing_face", "\U0001f92b", 34, "5.0", None),
    ("thinking_face", "\U0001f914", 35, "1.0", None),
    ("saluting_face", "\U0001fae1", 36, "14.0", None),
    ("zipper_mouth_face", "\U0001f910", 37, "1.0", None),
    ("face_with_raised_eyebrow", "\U0001f928", 38, "5.0", None),
    ("neutral_face", "\U0001f610", 39, "0.7", None),
    ("expressionless_face", "\U0001f611", 40, "1.0", None),
    ("face_without_mouth", "\U0001f636", 41, "1.0", None),
    ("dotted_line_face", "\U0001fae5", 42, "14.0", None),
    ("face_in_clouds", "\U0001f636\u200d\U0001f32b\ufe0f", 43, "13.1", None),
    ("smirking_face", "\U0001f60f", 44, "0.6", None),
    ("unamused_face", "\U0001f612", 45, "0.6", None),
    ("face_with_rolling_eyes", "\U0001f644", 46, "1.0", None),
    ("grimacing_face", "\U0001f62c", 47, "1.0", None),
    ("face_exhaling", "\U0001f62e\u200d\U0001f4a8", 48, "13.1", None),
    ("lying_face", "\U0001f925", 49, "3.0", None),
    ("shaking_face", "\U0001fae8", 50, "15.0", None),
    ("head_shaking_horizontally", "\U0001f642\u200d\u2194\ufe0f", 51, "15.1", None),
    ("head_shaking_vertically", "\U0001f642\u200d\u2195\ufe0f", 52, "15.1", None),
    ("relieved_face", "\U0001f60c", 53, "0.6", None),
    ("pensive_face", "\U0001f614", 54, "0.6", None),
    ("sleepy_face", "\U0001f62a", 55, "0.6", None),
    ("drooling_face", "\U0001f924", 56, "3.0", None),
    ("sleeping_face", "\U0001f634", 57, "1.0", None),
    ("face_with_medical_mask", "\U0001f637", 58, "0.6", None),
    ("face_with_thermometer", "\U0001f912", 59, "1.0", None),
    ("face_with_head_bandage", "\U0001f915", 60, "1.0", None),
    ("nauseated_face", "\U0001f922", 61, "3.0", None),
    ("face_vomiting", "\U0001f92e", 62, "5.0", None),
    ("sneezing_face", "\U0001f927", 63, "3.0", None),
    ("hot_face", "\U0001f975", 64, "11.0", None),
    ("cold_face", "\U0001f976", 65, "11.0", None),
    ("woozy_face", "\U0001f974", 66, "11.0", None),
    ("face_with_crossed_out_eyes", "\U0001f635", 67, "0.6", None),
    ("face_with_spiral_eyes", "\U0001f635\u200d\U0001f4ab", 68, "13.1", None),
    ("exploding_head", "\U0001f92f", 69, "5.0", None),
    ("cowboy_hat_face", "\U0001f920", 70, "3.0", None),
    ("partying_face", "\U0001f973", 71, "11.0", None),
    ("disguised_face", "\U0001f978", 72, "13.0", None),
    ("smiling_face_with_sunglasses", "\U0001f60e", 73, "1.0", None),
    ("nerd_face", "\U0001f913", 74, "1.0", None),
    ("face_with_monocle", "\U0001f9d0", 75, "5.0", None),
    ("confused_face", "\U0001f615", 76, "1.0", None),
    ("face_with_diagonal_mouth", "\U0001fae4", 77, "14.0", None),
    ("worried_face", "\U0001f61f", 78, "1.0", None),
    ("slightly_frowning_face", "\U0001f641", 79, "1.0", None),
    ("frowning_face", "\u2639\ufe0f", 80, "0.7", None),
    ("face_with_open_mouth", "\U0001f62e", 81, "1.0", None),
    ("hushed_face", "\U0001f62f", 82, "1.0", None),
    ("astonished_face", "\U0001f632", 83, "0.6", None),
    ("flushed_face", "\U0001f633", 84, "0.6", None),
    ("pleading_face", "\U0001f97a", 85, "11.0", None),
    ("face_holding_back_tears", "\U0001f979", 86, "14.0", None),
    ("frowning_face_with_open_mouth", "\U0001f626", 87, "1.0", None),
    ("anguished_face", "\U0001f627", 88, "1.0", None),
    ("fearful_face", "\U0001f628", 89, "0.6", None),
    ("anxious_face_with_sweat", "\U0001f630", 90, "0.6", None),
    ("sad_but_relieved_face", "\U0001f625", 91, "0.6", None),
    ("crying_face", "\U0001f622", 92, "0.6", None),
    ("loudly_crying_face", "\U0001f62d", 93, "0.6", None),
    ("face_screaming_in_fear", "\U0001f631", 94, "0.6", None),
    ("confounded_face", "\U0001f616", 95, "0.6", None),
    ("persevering_face", "\U0001f623", 96, "0.6", None),
    ("disappointed_face", "\U0001f61e", 97, "0.6", None),
    ("downcast_face_with_sweat", "\U0001f613", 98, "0.6", None),
    ("weary_face", "\U0001f629", 99, "0.6", None),
    ("tired_face", "\U0001f62b", 100, "0.6", None),
    ("yawning_face", "\U0001f971", 101, "12.0", None),
    ("face_with_steam_from_nose", "\U0001f624", 102, "0.6", None),
    ("enraged_face", "\U0001f621", 103, "0.6", None),
    ("angry_face", "\U0001f620", 104, "0.6", None),
    ("face_with_symbols_on_mouth", "\U0001f92c", 105, "5.0", None),
    ("smiling_face_with_horns", "\U0001f608", 106, "1.0", None),
    ("angry_face_with_horns", "\U0001f47f", 107, "0.6", None),
    ("skull", "\U0001f480", 108, "0.6", None),
    ("skull_and_crossbones", "\u2620\ufe0f", 109, "1.0", None),
    ("pile_of_poo", "\U0001f4a9", 110, "0.6", None),
    ("clown_face", "\U0001f921", 111, "3.0", None),
    ("ogre", "\U0001f479", 112, "0.6", None),
    ("goblin", "\U0001f47a", 113, "0.6", None),
    ("ghost", "\U0001f47b", 114, "0.6", None),
    ("alien", "\U0001f47d", 115, "0.6", None),
    ("alien_monster", "\U0001f47e", 116, "0.6", None),
    ("robot", "\U0001f916", 117, "1.0", None),
    ("grinning_cat", "\U0001f63a", 118, "0.6", None),
    ("grinning_cat_with_smiling_eyes", "\U0001f638", 119, "0.6", None),
    ("cat_with_tears_of_joy", "\U0001f639", 120, "0.6", None),
    ("smiling_cat_with_heart_eyes", "\U0001f63b", 121, "0.6", None),
    ("cat_with_wry_smile", "\U0001f63c", 122, "0.6", None),
    ("kissing_cat", "\U0001f63d", 123, "0.6", None),
    ("weary_cat", "\U0001f640", 124, "0.6", None),
    ("crying_cat", "\U0001f63f", 125, "0.6", None),
    ("pouting_cat", "\U0001f63e", 126, "0.6", None),
    ("see_no_evil_monkey", "\U0001f648", 127, "0.6", None),
    ("hear_no_evil_monkey", "\U0001f649", 128, "0.6", None),
    ("speak_no_evil_monkey", "\U0001f64a", 129, "0.6", None),
    ("love_letter", "\U0001f48c", 130, "0.6", None),
    ("heart_with_arrow", "\U0001f498", 131, "0.6", None),
    ("heart_with_ribbon", "\U0001f49d", 132, "0.6", None),
    ("sparkling_heart", "\U0001f496", 133, "0.6", None),
    ("growing_heart", "\U0001f497", 134, "0.6", None),
    ("beating_heart", "\U0001f493", 135, "0.6", None),
    ("revolving_hearts", "\U0001f49e", 136, "0.6", None),
    ("two_hearts", "\U0001f495", 137, "0.6", None),
    ("heart_decoration", "\U0001f49f", 138, "0.6", None),
    ("heart_exclamation", "\u2763\ufe0f", 139, "1.0", None),
    ("broken_heart", "\U0001f494", 140, "0.6", None),
    ("heart_on_fire", "\u2764\ufe0f\u200d\U0001f525", 141, "13.1", None),
    ("mending_heart", "\u2764\ufe0f\u200d\U0001fa79", 142, "13.1", None),
    ("red_heart", "\u2764\ufe0f", 143, "0.6", None),
    ("pink_heart", "\U0001fa77", 144, "15.0", None),
    ("orange_heart", "\U0001f9e1", 145, "5.0", None),
    ("yellow_heart", "\U0001f49b", 146, "0.6", None),
    ("green_heart", "\U0001f49a", 147, "0.6", None),
    ("blue_heart", "\U0001f499", 148, "0.6", None),
    ("light_blue_heart", "\U0001fa75", 149, "15.0", None),
    ("purple_heart", "\U0001f49c", 150, "0.6", None),
    ("brown_heart", "\U0001f90e", 151, "12.0", None),
    ("black_heart", "\U0001f5a4", 152, "3.0", None),
    ("grey_heart", "\U0001fa76", 153, "15.0", None),
    ("white_heart", "\U0001f90d", 154, "12.0", None),
    ("kiss_mark", "\U0001f48b", 155, "0.6", None),
    ("hundred_points", "\U0001f4af", 156, "0.6", None),
    ("anger_symbol", "\U0001f4a2", 157, "0.6", None),
    ("collision", "\U0001f4a5", 158, "0.6", None),
    ("dizzy", "\U0001f4ab", 159, "0.6", None),
    ("sweat_droplets", "\U0001f4a6", 160, "0.6", None),
    ("dashing_away", "\U0001f4a8", 161, "0.6", None),
    ("hole", "\U0001f573\ufe0f", 162, "0.7", None),
    ("speech_balloon", "\U0001f4ac", 163, "0.6", None),
    ("eye_in_speech_bubble", "\U0001f441\ufe0f\u200d\U0001f5e8\ufe0f", 164, "2.0", None),
    ("left_speech_bubble", "\U0001f5e8\ufe0f", 165, "2.0", None),
    ("right_anger_bubble", "\U0001f5ef\ufe0f", 166, "0.7", None),
    ("thought_balloon", "\U0001f4ad", 167, "1.0", None),
    ("zzz", "\U0001f4a4", 168, "0.6", None),
    # people-body
    ("waving_hand", "\U0001f44b", 169, "0.6", "single"),
    ("raised_back_of_hand", "\U0001f91a", 170, "3.0", "single"),
    ("hand_with_fingers_splayed", "\U0001f590\ufe0f", 171, "0.7", "single"),
    ("raised_hand", "\u270b", 172, "0.6", "single"),
    ("vulcan_salute", "\U0001f596", 173, "1.0", "single"),
    ("rightwards_hand", "\U0001faf1", 174, "14.0", "single"),
    ("leftwards_hand", "\U0001faf2", 175, "14.0", "single"),
    ("palm_down_hand", "\U0001faf3", 176, "14.0", "single"),
    ("palm_up_hand", "\U0001faf4", 177, "14.0", "single"),
    ("leftwards_pushing_hand", "\U0001faf7", 178, "15.0", "single"),
    ("rightwards_pushing_hand", "\U0001faf8", 179, "15.0", "single"),
    ("ok_hand", "\U0001f44c", 180, "0.6", "single"),
    ("pinched_fingers", "\U0001f90c", 181, "13.0", "single"),
    ("pinching_hand", "\U0001f90f", 182, "12.0", "single"),
    ("victory_hand", "\u270c\ufe0f", 183, "0.6", "single"),
    ("crossed_fingers", "\U0001f91e", 184, "3.0", "single"),
    ("hand_with_index_finger_and_thumb_crossed", "\U0001faf0", 185, "14.0", "single"),
    ("love_you_gesture", "\U0001f91f", 186, "5.0", "single"),
    ("sign_of_the_horns", "\U0001f918", 187, "1.0", "single"),
    ("call_me_hand", "\U0001f919", 188, "3.0", "single"),
    ("backhand_index_pointing_left", "\U0001f448", 189, "0.6", "single"),
    ("backhand_index_pointing_right", "\U0001f449", 190, "0.6", "single"),
    ("backhand_index_pointing_up", "\U0001f446", 191, "0.6", "single"),
    ("middle_finger", "\U0001f595", 192, "1.0", "single"),
    ("backhand_index_pointing_down", "\U0001f447", 193, "0.6", "single"),
    ("index_pointing_up", "\u261d\ufe0f", 194, "0.6", "single"),
    ("index_pointing_at_the_viewer", "\U0001faf5", 195, "14.0", "single"),
    ("thumbs_up", "\U0001f44d", 196, "0.6", "single"),
    ("thumbs_down", "\U0001f44e", 197, "0.6", "single"),
    ("raised_fist", "\u270a", 198, "0.6", "single"),
    ("oncoming_fist", "\U0001f44a", 199, "0.6", "single"),
    ("left_facing_fist", "\U0001f91b", 200, "3.0", "single"),
    ("right_facing_fist", "\U0001f91c", 201, "3.0", "single"),
    ("clapping_hands", "\U0001f44f", 202, "0.6", "single"),
    ("raising_hands", "\U0001f64c", 203, "0.6", "single"),
    ("heart_hands", "\U0001faf6", 204, "14.0", "single"),
    ("open_hands", "\U0001f450", 205, "0.6", "single"),
    ("palms_up_together", "\U0001f932", 206, "5.0", "single"),
    (
        "handshake",
        "\U0001f91d",
        207,
        "3.0",
        ("pair", "\U0001f91d{0}", "\U0001faf1{0}\u200d\U0001faf2{1}"),
    ),
    ("folded_hands", "\U0001f64f", 208, "0.6", "single"),
    ("writing_hand", "\u270d\ufe0f", 209, "0.7", "single"),
    ("nail_polish", "\U0001f485", 210, "0.6", "single"),
    ("selfie", "\U0001f933", 211, "3.0", "single"),
    ("flexed_biceps", "\U0001f4aa", 212, "0.6", "single"),
    ("mechanical_arm", "\U0001f9be", 213, "12.0", None),
    ("mechanical_leg", "\U0001f9bf", 214, "12.0", None),
    ("leg", "\U0001f9b5", 215, "11.0", "single"),
    ("foot", "\U0001f9b6", 216, "11.0", "single"),
    ("ear", "\U0001f442", 217, "0.6", "single"),
    ("ear_with_hearing_aid", "\U0001f9bb", 218, "12.0", "single"),
    ("nose", "\U0001f443", 219, "0.6", "single"),
    ("brain", "\U0001f9e0", 220, "5.0", None),
    ("anatomical_heart", "\U0001fac0", 221, "13.0", None),
    ("lungs", "\U0001fac1", 222, "13.0", None),
    ("tooth", "\U0001f9b7", 223, "11.0", None),
    ("bone", "\U0001f9b4", 224, "11.0", None),
    ("eyes", "\U0001f440", 225, "0.6", None),
    ("eye", "\U0001f441\ufe0f", 226, "0.7", None),
    ("tongue", "\U0001f445", 227, "0.6", None),
    ("mouth", "\U0001f444", 228, "0.6", None),
    ("biting_lip", "\U0001fae6", 229, "14.0", None),
    ("baby", "\U0001f476", 230, "0.6", "single"),
    ("child", "\U0001f9d2", 231, "5.0", "single"),
    ("boy", "\U0001f466", 232, "0.6", "single"),
    ("girl", "\U0001f467", 233, "0.6", "single"),
    ("person", "\U0001f9d1", 234, "5.0", "single"),
    ("person_blond_hair", "\U0001f471", 235, "0.6", "single"),
    ("man", "\U0001f468", 236, "0.6", "single"),
    ("person_beard", "\U0001f9d4", 237, "5.0", "single"),
    ("man_beard", "\U0001f9d4\u200d\u2642\ufe0f", 238, "13.1", "single"),
    ("woman_beard", "\U0001f9d4\u200d\u2640\ufe0f", 239, "13.1", "single"),
    ("man_red_hair", "\U0001f468\u200d\U0001f9b0", 240, "11.0", "single"),
    ("man_curly_hair", "\U0001f468\u200d\U0001f9b1", 241, "11.0", "single"),
    ("man_white_hair", "\U0001f468\u200d\U0001f9b3", 242, "11.0", "single"),
    ("man_bald", "\U0001f468\u200d\U0001f9b2", 243, "11.0", "single"),
    ("woman", "\U0001f469", 244, "0.6", "single"),
    ("woman_red_hair", "\U0001f469\u200d\U0001f9b0", 245, "11.0", "single"),
    ("person_red_hair", "\U0001f9d1\u200d\U0001f9b0", 246, "12.1", "single"),
    ("woman_curly_hair", "\U0001f469\u200d\U0001f9b1", 247, "11.0", "single"),
    ("person_curly_hair", "\U0001f9d1\u200d\U0001f9b1", 248, "12.1", "single"),
    ("woman_white_hair", "\U0001f469\u200d\U0001f9b3", 249, "11.0", "single"),
    ("person_white_hair", "\U0001f9d1\u200d\U0001f9b3", 250, "12.1", "single"),
    ("woman_bald", "\U0001f469\u200d\U0001f9b2", 251, "11.0", "single"),
    ("person_bald", "\U0001f9d1\u200d\U0001f9b2", 252, "12.1", "single"),
    ("woman_blond_hair", "\U0001f471\u200d\u2640\ufe0f", 253, "4.0", "single"),
    ("man_blond_hair", "\U0001f471\u200d\u2642\ufe0f", 254, "4.0", "single"),
    ("older_person", "\U0001f9d3", 255, "5.0", "single"),
    ("old_man", "\U0001f474", 256, "0.6", "single"),
    ("old_woman", "\U0001f475", 257, "0.6", "single"),
    ("person_frowning", "\U0001f64d", 258, "0.6", "single"),
    ("man_frowning", "\U0001f64d\u200d\u2642\ufe0f", 259, "4.0", "single"),
    ("woman_frowning", "\U0001f64d\u200d\u2640\ufe0f", 260, "4.0", "single"),
    ("person_pouting", "\U0001f64e", 261, "0.6", "single"),
    ("man_pouting", "\U0001f64e\u200d\u2642\ufe0f", 262, "4.0", "single"),
    ("woman_pouting", "\U0001f64e\u200d\u2640\ufe0f", 263, "4.0", "single"),
    ("person_gesturing_no", "\U0001f645", 264, "0.6", "single"),
    ("man_gesturing_no", "\U0001f645\u200d\u2642\ufe0f", 265, "4.0", "single"),
    ("woman_gesturing_no", "\U0001f645\u200d\u2640\ufe0f", 266, "4.0", "single"),
    ("person_gesturing_ok", "\U0001f646", 267, "0.6", "single"),
    ("man_gesturing_ok", "\U0001f646\u200d\u2642\ufe0f", 268, "4.0", "single"),
    ("woman_gesturing_ok", "\U0001f646\u200d\u2640\ufe0f", 269, "4.0", "single"),
    ("person_tipping_hand", "\U0001f481", 270, "0.6", "single"),
    ("man_tipping_hand", "\U0001f481\u200d\u2642\ufe0f", 271, "4.0", "single"),
    ("woman_tipping_hand", "\U0001f481\u200d\u2640\ufe0f", 272, "4.0", "single"),
    ("person_raising_hand", "\U0001f64b", 273, "0.6", "single"),
    ("man_raising_hand", "\U0001f64b\u200d\u2642\ufe0f", 274, "4.0", "single"),
    ("woman_raising_hand", "\U0001f64b\u200d\u2640\ufe0f", 275, "4.0", "single"),
    ("deaf_person", "\U0001f9cf", 276, "12.0", "single"),
    ("deaf_man", "\U0001f9cf\u200d\u2642\ufe0f", 277, "12.0", "single"),
    ("deaf_woman", "\U0001f9cf\u200d\u2640\ufe0f", 278, "12.0", "single"),
    ("person_bowing", "\U0001f647", 279, "0.6", "single"),
    ("man_bowing", "\U0001f647\u200d\u2642\ufe0f", 280, "4.0", "single"),
    ("woman_bowing", "\U0001f647\u200d\u2640\ufe0f", 281, "4.0", "single"),
    ("person_facepalming", "\U0001f926", 282, "3.0", "single"),
    ("man_facepalming", "\U0001f926\u200d\u2642\ufe0f", 283, "4.0", "single"),
    ("woman_facepalming", "\U0001f926\u200d\u2640\ufe0f", 284, "4.0", "single"),
    ("person_shrugging", "\U0001f937", 285, "3.0", "single"),
    ("man_shrugging", "\U0001f937\u200d\u2642\ufe0f", 286, "4.0", "single"),
    ("woman_shrugging", "\U0001f937\u200d\u2640\ufe0f", 287, "4.0", "single"),
    ("health_worker", "\U0001f9d1\u200d\u2695\ufe0f", 288, "12.1", "single"),
    ("man_health_worker", "\U0001f468\u200d\u2695\ufe0f", 289, "4.0", "single"),
    ("woman_health_worker", "\U0001f469\u200d\u2695\ufe0f", 290, "4.0", "single"),
    ("student", "\U0001f9d1\u200d\U0001f393", 291, "12.1", "single"),
    ("man_student", "\U0001f468\u200d\U0001f393", 292, "4.0", "single"),
    ("woman_student", "\U0001f469\u200d\U0001f393", 293, "4.0", "single"),
    ("teacher", "\U0001f9d1\u200d\U0001f3eb", 294, "12.1", "single"),
    ("man_teacher", "\U0001f468\u200d\U0001f3eb", 295, "4.0", "single"),
    ("woman_teacher", "\U0001f469\u200d\U0001f3eb", 296, "4.0", "single"),
    ("judge", "\U0001f9d1\u200d\u2696\ufe0f", 297, "12.1", "single"),
    ("man_judge", "\U0001f468\u200d\u2696\ufe0f", 298, "4.0", "single"),
    ("woman_judge", "\U0001f469\u200d\u2696\ufe0f", 299, "4.0", "single"),
    ("farmer", "\U0001f9d1\u200d\U0001f33e", 300, "12.1", "single"),
    ("man_farmer", "\U0001f468\u200d\U0001f33e", 301, "4.0", "single"),
    ("woman_farmer", "\U0001f469\u200d\U0001f33e", 302, "4.0", "single"),
    ("cook", "\U0001f9d1\u200d\U0001f373", 303, "12.1", "single"),
    ("man_cook", "\U0001f468\u200d\U0001f373", 304, "4.0", "single"),
    ("woman_cook", "\U0001f469\u200d\U0001f373", 305, "4.0", "single"),
    ("mechanic", "\U0001f9d1\u200d\U0001f527", 306, "12.1", "single"),
    ("man_mechanic", "\U0001f468\u200d\U0001f527", 307, "4.0", "single"),
    ("woman_mechanic", "\U0001f469\u200d\U0001f527", 308, "4.0", "single"),
    ("factory_worker", "\U0001f9d1\u200d\U0001f3ed", 309, "12.1", "single"),
    ("man_factory_worker", "\U0001f468\u200d\U0001f3ed", 310, "4.0", "single"),
    ("woman_factory_worker", "\U0001f469\u200d\U0001f3ed", 311, "4.0", "single"),
    ("office_worker", "\U0001f9d1\u200d\U0001f4bc", 312, "12.1", "single"),
    ("man_office_worker", "\U0001f468\u200d\U0001f4bc", 313, "4.0", "single"),
    ("woman_office_worker", "\U0001f469\u200d\U0001f4bc", 314, "4.0", "single"),
    ("scientist", "\U0001f9d1\u200d\U0001f52c", 315, "12.1", "single"),
    ("man_scientist", "\U0001f468\u200d\U0001f52c", 316, "4.0", "single"),
    ("woman_scientist", "\U0001f469\u200d\U0001f52c", 317, "4.0", "single"),
    ("technologist", "\U0001f9d1\u200d\U0001f4bb", 318, "12.1", "single"),
    ("man_technologist", "\U0001f468\u200d\U0001f4bb", 319, "4.0", "single"),
    ("woman_technologist", "\U0001f469\u200d\U0001f4bb", 320, "4.0", "single"),
    ("singer", "\U0001f9d1\u200d\U0001f3a4", 321, "12.1", "single"),
    ("man_singer", "\U0001f468\u200d\U0001f3a4", 322, "4.0", "single"),
    ("woman_singer", "\U0001f469\u200d\U0001f3a4", 323, "4.0", "single"),
    ("artist", "\U0001f9d1\u200d\U0001f3a8", 324, "12.1", "single"),
    ("man_artist", "\U0001f468\u200d\U0001f3a8", 325, "4.0", "single"),
    ("woman_artist", "\U0001f469\u200d\U0001f3a8", 326, "4.0", "single"),
    ("pilot", "\U0001f9d1\u200d\u2708\ufe0f", 327, "12.1", "single"),
    ("man_pilot", "\U0001f468\u200d\u2708\ufe0f", 328, "4.0", "single"),
    ("woman_pilot", "\U0001f469\u200d\u2708\ufe0f", 329, "4.0", "single"),
    ("astronaut", "\U0001f9d1\u200d\U0001f680", 330, "12.1", "single"),
    ("man_astronaut", "\U0001f468\u200d\U0001f680", 331, "4.0", "single"),
    ("woman_astronaut", "\U0001f469\u200d\U0001f680", 332, "4.0", "single"),
    ("firefighter", "\U0001f9d1\u200d\U0001f692", 333, "12.1", "single"),
    ("man_firefighter", "\U0001f468\u200d\U0001f692", 334, "4.0", "single"),
    ("woman_firefighter", "\U0001f469\u200d\U0001f692", 335, "4.0", "single"),
    ("police_officer", "\U0001f46e", 336, "0.6", "single"),
    ("man_police_officer", "\U0001f46e\u200d\u2642\ufe0f", 337, "4.0", "single"),
    ("woman_police_officer", "\U0001f46e\u200d\u2640\ufe0f", 338, "4.0", "single"),
    ("detective", "\U0001f575\ufe0f", 339, "0.7", "single"),
    ("man_detective", "\U0001f575\ufe0f\u200d\u2642\ufe0f", 340, "4.0", "single"),
    ("woman_detective", "\U0001f575\ufe0f\u200d\u2640\ufe0f", 341, "4.0", "single"),
    ("guard", "\U0001f482", 342, "0.6", "single"),
    ("man_guard", "\U0001f482\u200d\u2642\ufe0f", 343, "4.0", "single"),
    ("woman_guard", "\U0001f482\u200d\u2640\ufe0f", 344, "4.0", "single"),
    ("ninja", "\U0001f977", 345, "13.0", "single"),
    ("construction_worker", "\U0001f477", 346, "0.6", "single"),
    ("man_construction_worker", "\U0001f477\u200d\u2642\ufe0f", 347, "4.0", "single"),
    ("woman_construction_worker", "\U0001f477\u200d\u2640\ufe0f", 348, "4.0", "single"),
    ("person_with_crown", "\U0001fac5", 349, "14.0", "single"),
    ("prince", "\U0001f934", 350, "3.0", "single"),
    ("princess", "\U0001f478", 351, "0.6", "single"),
    ("person_wearing_turban", "\U0001f473", 352, "0.6", "single"),
    ("man_wearing_turban", "\U0001f473\u200d\u2642\ufe0f", 353, "4.0", "single"),
    ("woman_wearing_turban", "\U0001f473\u200d\u2640\ufe0f", 354, "4.0", "single"),
    ("person_with_skullcap", "\U0001f472", 355, "0.6", "single"),
    ("woman_with_headscarf", "\U0001f9d5", 356, "5.0", "single"),
    ("person_in_tuxedo", "\U0001f935", 357, "3.0", "single"),
    ("man_in_tuxedo", "\U0001f935\u200d\u2642\ufe0f", 358, "13.0", "single"),
    ("woman_in_tuxedo", "\U0001f935\u200d\u2640\ufe0f", 359, "13.0", "single"),
    ("person_with_veil", "\U0001f470", 360, "0.6", "single"),
    ("man_with_veil", "\U0001f470\u200d\u2642\ufe0f", 361, "13.0", "single"),
    ("woman_with_veil", "\U0001f470\u200d\u2640\ufe0f", 362, "13.0", "single"),
    ("pregnant_woman", "\U0001f930", 363, "3.0", "single"),
    ("pregnant_man", "\U0001fac3", 364, "14.0", "single"),
    ("pregnant_person", "\U0001fac4", 365, "14.0", "single"),
    ("breast_feeding", "\U0001f931", 366, "5.0", "single"),
    ("woman_feeding_baby", "\U0001f469\u200d\U0001f37c", 367, "13.0", "single"),
    ("man_feeding_baby", "\U0001f468\u200d\U0001f37c", 368, "13.0", "single"),
    ("person_feeding_baby", "\U0001f9d1\u200d\U0001f37c", 369, "13.0", "single"),
    ("baby_angel", "\U0001f47c", 370, "0.6", "single"),
    ("santa_claus", "\U0001f385", 371, "0.6", "single"),
    ("mrs_claus", "\U0001f936", 372, "3.0", "single"),
    ("mx_claus", "\U0001f9d1\u200d\U0001f384", 373, "13.0", "single"),
    ("superhero", "\U0001f9b8", 374, "11.0", "single"),
    ("man_superhero", "\U0001f9b8\u200d\u2642\ufe0f", 375, "11.0", "single"),
    ("woman_superhero", "\U0001f9b8\u200d\u2640\ufe0f", 376, "11.0", "single"),
    ("supervillain", "\U0001f9b9", 377, "11.0", "single"),
    ("man_supervillain", "\U0001f9b9\u200d\u2642\ufe0f", 378, "11.0", "single"),
    ("woman_supervillain", "\U0001f9b9\u200d\u2640\ufe0f", 379, "11.0", "single"),
    ("mage", "\U0001f9d9", 380, "5.0", "single"),
    ("man_mage", "\U0001f9d9\u200d\u2642\ufe0f", 381, "5.0", "single"),
    ("woman_mage", "\U0001f9d9\u200d\u2640\ufe0f", 382, "5.0", "single"),
    ("fairy", "\U0001f9da", 383, "5.0", "single"),
    ("man_fairy", "\U0001f9da\u200d\u2642\ufe0f", 384, "5.0", "single"),
    ("woman_fairy", "\U0001f9da\u200d\u2640\ufe0f", 385, "5.0", "single"),
    ("vampire", "\U0001f9db", 386, "5.0", "single"),
    ("man_vampire", "\U0001f9db\u200d\u2642\ufe0f", 387, "5.0", "single"),
    ("woman_vampire", "\U0001f9db\u200d\u2640\ufe0f", 388, "5.0", "single"),
    ("merperson", "\U0001f9dc", 389, "5.0", "single"),
    ("merman", "\U0001f9dc\u200d\u2642\ufe0f", 390, "5.0", "single"),
    ("mermaid", "\U0001f9dc\u200d\u2640\ufe0f", 391, "5.0", "single"),
    ("elf", "\U0001f9dd", 392, "5.0", "single"),
    ("man_elf", "\U0001f9dd\u200d\u2642\ufe0f", 393, "5.0", "single"),
    ("woman_elf", "\U0001f9dd\u200d\u2640\ufe0f", 394, "5.0", "single"),
    ("genie", "\U0001f9de", 395, "5.0", None),
    ("man_genie", "\U0001f9de\u200d\u2642\ufe0f", 396, "5.0", None),
    ("woman_genie", "\U0001f9de\u200d\u2640\ufe0f", 397, "5.0", None),
    ("zombie", "\U0001f9df", 398, "5.0", None),
    ("man_zombie", "\U0001f9df\u200d\u2642\ufe0f", 399, "5.0", None),
    ("woman_zombie", "\U0001f9df\u200d\u2640\ufe0f", 400, "5.0", None),
    ("troll", "\U0001f9cc", 401, "14.0", None),
    ("person_getting_massage", "\U0001f486", 402, "0.6", "single"),
    ("man_getting_massage", "\U0001f486\u200d\u2642\ufe0f", 403, "4.0", "single"),
    ("woman_getting_massage", "\U0001f486\u200d\u2640\ufe0f", 404, "4.0", "single"),
    ("person_getting_haircut", "\U0001f487", 405, "0.6", "single"),
    ("man_getting_haircut", "\U0001f487\u200d\u2642\ufe0f", 406, "4.0", "single"),
    ("woman_getting_haircut", "\U0001f487\u200d\u2640\ufe0f", 407, "4.0", "single"),
    ("person_walking", "\U0001f6b6", 408, "0.6", "single"),
    ("man_walking", "\U0001f6b6\u200d\u2642\ufe0f", 409, "4.0", "single"),
    ("woman_walking", "\U0001f6b6\u200d\u2640\ufe0f", 410, "4.0", "single"),
    ("person_walking_facing_right", "\U0001f6b6\u200d\u27a1\ufe0f", 411, "15.1", "single"),
    (
        "woman_walking_facing_right",
        "\U0001f6b6\u200d\u2640\ufe0f\u200d\u27a1\ufe0f",
        412,
        "15.1",
        "single",
    ),
    (
        "man_walking_facing_right",
        "\U0001f6b6\u200d\u2642\ufe0f\u200d\u27a1\ufe0f",
        413,
        "15.1",
        "single",
    ),
    ("person_standing", "\U0001f9cd", 414, "12.0", "single"),
    ("man_standing", "\U0001f9cd\u200d\u2642\ufe0f", 415, "12.0", "single"),
    ("woman_standing", "\U0001f9cd\u200d\u2640\ufe0f", 416, "12.0", "single"),
    ("person_kneeling", "\U0001f9ce", 417, "12.0", "single"),
    ("man_kneeling", "\U0001f9ce\u200d\u2642\ufe0f", 418, "12.0", "single"),
    ("woman_kneeling", "\U0001f9ce\u200d\u2640\ufe0f", 419, "12.0", "single"),
    ("person_kneeling_facing_right", "\U0001f9ce\u200d\u27a1\ufe0f", 420, "15.1", "single"),
    (
        "woman_kneeling_facing_right",
        "\U0001f9ce\u200d\u2640\ufe0f\u200d\u27a1\ufe0f",
        421,
        "15.1",
        "single",
    ),
    (
        "man_kneeling_facing_right",
        "\U0001f9ce\u200d\u2642\ufe0f\u200d\u27a1\ufe0f",
        422,
        "15.1",
        "single",
    ),
    ("person_with_white_cane", "\U0001f9d1\u200d\U0001f9af", 423, "12.1", "single"),
    (
        "person_with_white_cane_facing_right",
        "\U0001f9d1\u200d\U0001f9af\u200d\u27a1\ufe0f",
        424,
        "15.1",
        "single",
    ),
    ("man_with_white_cane", "\U0001f468\u200d\U0001f9af", 425, "12.0", "single"),
    (
        "man_with_white_cane_facing_right",
        "\U0001f468\u200d\U0001f9af\u200d\u27a1\ufe0f",
        426,
        "15.1",
        "single",
    ),
    ("woman_with_white_cane", "\U0001f469\u200d\U0001f9af", 427, "12.0", "single"),
    (
        "woman_with_white_cane_facing_right",
        "\U0001f469\u200d\U0001f9af\u200d\u27a1\ufe0f",
        428,
        "15.1",
        "single",
    ),
    ("person_in_motorized_wheelchair", "\U0001f9d1\u200d\U0001f9bc", 429, "12.1", "single"),
    (
        "person_in_motorized_wheelchair_facing_right",
        "\U0001f9d1\u200d\U0001f9bc\u200d\u27a1\ufe0f",
        430,
        "15.1",
        "single",
    ),
    ("man_in_motorized_wheelchair", "\U0001f468\u200d\U0001f9bc", 431, "12.0", "single"),
    (
        "man_in_motorized_wheelchair_facing_right",
        "\U0001f468\u200d\U0001f9bc\u200d\u27a1\ufe0f",
        432,
        "15.1",
        "single",
    ),
    ("woman_in_motorized_wheelchair", "\U0001f469\u200d\U0001f9bc", 433, "12.0", "single"),
    (
        "woman_in_motorized_wheelchair_facing_right",
        "\U0001f469\u200d\U0001f9bc\u200d\u27a1\ufe0f",
        434,
        "15.1",
        "single",
    ),
    ("person_in_manual_wheelchair", "\U0001f9d1\u200d\U0001f9bd", 435, "12.1", "single"),
    (
        "person_in_manual_wheelchair_facing_right",
        "\U0001f9d1\u200d\U0001f9bd\u200d\u27a1\ufe0f",
        436,
        "15.1",
        "single",
    ),
    ("man_in_manual_wheelchair", "\U0001f468\u200d\U0001f9bd", 437, "12.0", "single"),
    (
        "man_in_manual_wheelchair_facing_right",
        "\U0001f468\u200d\U0001f9bd\u200d\u27a1\ufe0f",
        438,
        "15.1",
        "single",
    ),
    ("woman_in_manual_wheelchair", "\U0001f469\u200d\U0001f9bd", 439, "12.0", "single"),
    (
        "woman_in_manual_wheelchair_facing_right",
        "\U0001f469\u200d\U0001f9bd\u200d\u27a1\ufe0f",
        440,
        "15.1",
        "single",
    ),
    ("person_running", "\U0001f3c3", 441, "0.6", "single"),
    ("man_running", "\U0001f3c3\u200d\u2642\ufe0f", 442, "4.0", "single"),
    ("woman_running", "\U0001f3c3\u200d\u2640\ufe0f", 443, "4.0", "single"),
    ("person_running_facing_right", "\U0001f3c3\u200d\u27a1\ufe0f", 444, "15.1", "single"),
    (
        "woman_running_facing_right",
        "\U0001f3c3\u200d\u2640\ufe0f\u200d\u27a1\ufe0f",
        445,
        "15.1",
        "single",
    ),
    (
        "man_running_facing_right",
        "\U0001f3c3\u200d\u2642\ufe0f\u200d\u27a1\ufe0f",
        446,
        "15.1",
        "single",
    ),
    ("woman_dancing", "\U0001f483", 447, "0.6", "single"),
    ("man_dancing", "\U0001f57a", 448, "3.0", "single"),
    ("person_in_suit_levitating", "\U0001f574\ufe0f", 449, "0.7", "single"),
    ("people_with_bunny_ears", "\U0001f46f", 450, "0.6", None),
    ("men_with_bunny_ears", "\U0001f46f\u200d\u2642\ufe0f", 451, "4.0", None),
    ("women_with_bunny_ears", "\U0001f46f\u200d\u2640\ufe0f", 452, "4.0", None),
    ("person_in_steamy_room", "\U0001f9d6", 453, "5.0", "single"),
    ("man_in_steamy_room", "\U0001f9d6\u200d\u2642\ufe0f", 454, "5.0", "single"),
    ("woman_in_steamy_room", "\U0001f9d6\u200d\u2640\ufe0f", 455, "5.0", "single"),
    ("person_climbing", "\U0001f9d7", 456, "5.0", "single"),
    ("man_climbing", "\U0001f9d7\u200d\u2642\ufe0f", 457, "5.0", "single"),
    ("woman_climbing", "\U0001f9d7\u200d\u2640\ufe0f", 458, "5.0", "single"),
    ("person_fencing", "\U0001f93a", 459, "3.0", None),
    ("horse_racing", "\U0001f3c7", 460, "1.0", "single"),
    ("skier", "\u26f7\ufe0f", 461, "0.7", None),
    ("snowboarder", "\U0001f3c2", 462, "0.6", "single"),
    ("person_golfing", "\U0001f3cc\ufe0f", 463, "0.7", "single"),
    ("man_golfing", "\U0001f3cc\ufe0f\u200d\u2642\ufe0f", 464, "4.0", "single"),
    ("woman_golfing", "\U0001f3cc\ufe0f\u200d\u2640\ufe0f", 465, "4.0", "single"),
    ("person_surfing", "\U0001f3c4", 466, "0.6", "single"),
    ("man_surfing", "\U0001f3c4\u200d\u2642\ufe0f", 467, "4.0", "single"),
    ("woman_surfing", "\U0001f3c4\u200d\u2640\ufe0f", 468, "4.0", "single"),
    ("person_rowing_boat", "\U0001f6a3", 469, "1.0", "single"),
    ("man_rowing_boat", "\U0001f6a3\u200d\u2642\ufe0f", 470, "4.0", "single"),
    ("woman_rowing_boat", "\U0001f6a3\u200d\u2640\ufe0f", 471, "4.0", "single"),
    ("person_swimming", "\U0001f3ca", 472, "0.6", "single"),
    ("man_swimming", "\U0001f3ca\u200d\u2642\ufe0f", 473, "4.0", "single"),
    ("woman_swimming", "\U0001f3ca\u200d\u2640\ufe0f", 474, "4.0", "single"),
    ("person_bouncing_ball", "\u26f9\ufe0f", 475, "0.7", "single"),
    ("man_bouncing_ball", "\u26f9\ufe0f\u200d\u2642\ufe0f", 476, "4.0", "single"),
    ("woman_bouncing_ball", "\u26f9\ufe0f\u200d\u2640\ufe0f", 477, "4.0", "single"),
    ("person_lifting_weights", "\U0001f3cb\ufe0f", 478, "0.7", "single"),
    ("man_lifting_weights", "\U0001f3cb\ufe0f\u200d\u2642\ufe0f", 479, "4.0", "single"),
    ("woman_lifting_weights", "\U0001f3cb\ufe0f\u200d\u2640\ufe0f", 480, "4.0", "single"),
    ("person_biking", "\U0001f6b4", 481, "1.0", "single"),
    ("man_biking", "\U0001f6b4\u200d\u2642\ufe0f", 482, "4.0", "single"),
    ("woman_biking", "\U0001f6b4\u200d\u2640\ufe0f", 483, "4.0", "single"),
    ("person_mountain_biking", "\U0001f6b5", 484, "1.0", "single"),
    ("man_mountain_biking", "\U0001f6b5\u200d\u2642\ufe0f", 485, "4.0", "single"),
    ("woman_mountain_biking", "\U0001f6b5\u200d\u2640\ufe0f", 486, "4.0", "single"),
    ("person_cartwheeling", "\U0001f938", 487, "3.0", "single"),
    ("man_cartwheeling", "\U0001f938\u200d\u2642\ufe0f", 488, "4.0", "single"),
    ("woman_cartwheeling", "\U0001f938\u200d\u2640\ufe0f", 489, "4.0", "single"),
    ("people_wrestling", "\U0001f93c", 490, "3.0", None),
    ("men_wrestling", "\U0001f93c\u200d\u2642\ufe0f", 491, "4.0", None),
    ("women_wrestling", "\U0001f93c\u200d\u2640\ufe0f", 492, "4.0", None),
    ("person_playing_water_polo", "\U0001f93d", 493, "3.0", "single"),
    ("man_playing_water_polo", "\U0001f93d\u200d\u2642\ufe0f", 494, "4.0", "single"),
    ("woman_playing_water_polo", "\U0001f93d\u200d\u2640\ufe0f", 495, "4.0", "single"),
    ("person_playing_handball", "\U0001f93e", 496, "3.0", "single"),
    ("man_playing_handball", "\U0001f93e\u200d\u2642\ufe0f", 497, "4.0", "single"),
    ("woman_playing_handball", "\U0001f93e\u200d\u2640\ufe0f", 498, "4.0", "single"),
    ("person_juggling", "\U0001f939", 499, "3.0", "single"),
    ("man_juggling", "\U0001f939\u200d\u2642\ufe0f", 500, "4.0", "single"),
    ("woman_juggling", "\U0001f939\u200d\u2640\ufe0f", 501, "4.0", "single"),
    ("person_in_lotus_position", "\U0001f9d8", 502, "5.0", "single"),
    ("man_in_lotus_position", "\U0001f9d8\u200d\u2642\ufe0f", 503, "5.0", "single"),
    ("woman_in_lotus_position", "\U0001f9d8\u200d\u2640\ufe0f", 504, "5.0", "single"),
    ("person_taking_bath", "\U0001f6c0", 505, "0.6", "single"),
    ("person_in_bed", "\U0001f6cc", 506, "1.0", "single"),
    (
        "people_holding_hands",
        "\U0001f9d1\u200d\U0001f91d\u200d\U0001f9d1",
        507,
        "12.0",
        ("pair", None, "\U0001f9d1{0}\u200d\U0001f91d\u200d\U0001f9d1{1}"),
    ),
    (
        "women_holding_hands",
        "\U0001f46d",
        508,
        "1.0",
        ("pair", "\U0001f46d{0}", "\U0001f469{0}\u200d\U0001f91d\u200d\U0001f469{1}"),
    ),
    (
        "woman_and_man_holding_hands",
        "\U0001f46b",
        509,
        "0.6",
        ("pair", "\U0001f46b{0}", "\U0001f469{0}\u200d\U0001f91d\u200d\U0001f468{1}"),
    ),
    (
        "men_holding_hands",
        "\U0001f46c",
        510,
        "1.0",
        ("pair", "\U0001f46c{0}", "\U0001f468{0}\u200d\U0001f91d\u200d\U0001f468{1}"),
    ),
    (
        "kiss",
        "\U0001f48f",
        511,
        "0.6",
        (
            "pair",
            "\U0001f48f{0}",
            "\U0001f9d1{0}\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f9d1{1}",
        ),
    ),
    (
        "kiss_woman_man",
        "\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468",
        512,
        "2.0",
        ("pair", None, "\U0001f469{0}\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468{1}"),
    ),
    (
        "kiss_man_man",
        "\U0001f468\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468",
        513,
        "2.0",
        ("pair", None, "\U0001f468{0}\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f468{1}"),
    ),
    (
        "kiss_woman_woman",
        "\U0001f469\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469",
        514,
        "2.0",
        ("pair", None, "\U0001f469{0}\u200d\u2764\ufe0f\u200d\U0001f48b\u200d\U0001f469{1}"),
    ),
    (
        "couple_with_heart",
        "\U0001f491",
        515,
        "0.6",
        ("pair", "\U0001f491{0}", "\U0001f9d1{0}\u200d\u2764\ufe0f\u200d\U0001f9d1{1}"),
    ),
    (
        "couple_with_heart_woman_man",
        "\U0001f469\u200d\u2764\ufe0f\u200d\U0001f468",
        516,
        "2.0",
        ("pair", None, "\U0001f469{0}\u200d\u2764\ufe0f\u200d\U0001f468{1}"),
    ),
    (
        "couple_with_heart_man_man",
        "\U0001f468\u200d\u2764\ufe0f\u200d\U0001f468",
        517,
        "2.0",
        ("pair", None, "\U0001f468{0}\u200d\u2764\ufe0f\u200d\U0001f468{1}"),
    ),
    (
        "couple_with_heart_woman_woman",
        "\U0001f469\u200d\u2764\ufe0f\u200d\U0001f469",
        518,
        "2.0",
        ("pair", None, "\U0001f469{0}\u200d\u2764\ufe0f\u200d\U0001f469{1}"),
    ),
    ("family_man_woman_boy", "\U0001f468\u200d\U0001f469\u200d\U0001f466", 519, "2.0", None),
    ("family_man_woman_girl", "\U0001f468\u200d\U0001f469\u200d\U0001f467", 520, "2.0", None),
    (
        "family_man_woman_girl_boy",
        "\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466",
        521,
        "2.0",
        None,
    ),
    (
        "family_man_woman_boy_boy",
        "\U0001f468\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466",
        522,
        "2.0",
        None,
    ),
    (
        "family_man_woman_girl_girl",
        "\U0001f468\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467",
        523,
        "2.0",
        None,
    ),
    ("family_man_man_boy", "\U0001f468\u200d\U0001f468\u200d\U0001f466", 524, "2.0", None),
    ("family_man_man_girl", "\U0001f468\u200d\U0001f468\u200d\U0001f467", 525, "2.0", None),
    (
        "family_man_man_girl_boy",
        "\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f466",
        526,
        "2.0",
        None,
    ),
    (
        "family_man_man_boy_boy",
        "\U0001f468\u200d\U0001f468\u200d\U0001f466\u200d\U0001f466",
        527,
        "2.0",
        None,
    ),
    (
        "family_man_man_girl_girl",
        "\U0001f468\u200d\U0001f468\u200d\U0001f467\u200d\U0001f467",
        528,
        "2.0",
        None,
    ),
    ("family_woman_woman_boy", "\U0001f469\u200d\U0001f469\u200d\U0001f466", 529, "2.0", None),
    ("family_woman_woman_girl", "\U0001f469\u200d\U0001f469\u200d\U0001f467", 530, "2.0", None),
    (
        "family_woman_woman_girl_boy",
        "\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f466",
        531,
        "2.0",
        None,
    ),
    (
        "family_woman_woman_boy_boy",
        "\U0001f469\u200d\U0001f469\u200d\U0001f466\u200d\U0001f466",
        532,
        "2.0",
        None,
    ),
    (
        "family_woman_woman_girl_girl",
        "\U0001f469\u200d\U0001f469\u200d\U0001f467\u200d\U0001f467",
        533,
        "2.0",
        None,
    ),
    ("family_man_boy", "\U0001f468\u200d\U0001f466", 534, "4.0", None),
    ("family_man_boy_boy", "\U0001f468\u200d\U0001f466\u200d\U0001f466", 535, "4.0", None),
    ("family_man_girl", "\U0001f468\u200d\U0001f467", 536, "4.0", None),
    ("family_man_girl_boy", "\U0001f468\u200d\U0001f467\u200d\U0001f466", 537, "4.0", None),
    ("family_man_girl_girl", "\U0001f468\u200d\U0001f467\u200d\U0001f467", 538, "4.0", None),
    ("family_woman_boy", "\U0001f469\u200d\U0001f466", 539, "4.0", None),
    ("family_woman_boy_boy", "\U0001f469\u200d\U0001f466\u200d\U0001f466", 540, "4.0", None),
    ("family_woman_girl", "\U0001f469\u200d\U0001f467", 541, "4.0", None),
    ("family_woman_girl_boy", "\U0001f469\u200d\U0001f467\u200d\U0001f466", 542, "4.0", None),
    ("family_woman_girl_girl", "\U0001f469\u200d\U0001f467\u200d\U0001f467", 543, "4.0", None),
    ("speaking_head", "\U0001f5e3\ufe0f", 544, "0.7", None),
    ("bust_in_silhouette", "\U0001f464", 545, "0.6", None),
    ("busts_in_silhouette", "\U0001f465", 546, "1.0", None),
    ("people_hugging", "\U0001fac2", 547, "13.0", None),
    ("family", "\U0001f46a", 548, "0.6", None),
    ("family_adult_adult_child", "\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2", 549, "15.1", None),
    (
        "family_adult_adult_child_child",
        "\U0001f9d1\u200d\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2",
        550,
        "15.1",
        None,
    ),
    ("family_adult_child", "\U0001f9d1\u200d\U0001f9d2", 551, "15.1", None),
    ("family_adult_child_child", "\U0001f9d1\u200d\U0001f9d2\u200d\U0001f9d2", 552, "15.1", None),
    ("footprints", "\U0001f463", 553, "0.6", None),
    # animals-nature
    ("monkey_face", "\U0001f435", 554, "0.6", None),
    ("monkey", "\U0001f412", 555, "0.6", None),
    ("gorilla", "\U0001f98d", 556, "3.0", None),
    ("orangutan", "\U0001f9a7", 557, "12.0", None),
    ("dog_face", "\U0001f436", 558, "0.6", None),
    ("dog", "\U0001f415", 559, "0.7", None),
    ("guide_dog", "\U0001f9ae", 560, "12.0", None),
    ("service_dog", "\U0001f415\u200d\U0001f9ba", 561, "12.0", None),
    ("poodle", "\U0001f429", 562, "0.6", None),
    ("wolf", "\U0001f43a", 563, "0.6", None),
    ("fox", "\U0001f98a", 564, "3.0", None),
    ("raccoon", "\U0001f99d", 565, "11.0", None),
    ("cat_face", "\U0001f431", 566, "0.6", None),
    ("cat", "\U0001f408", 567, "0.7", None),
    ("black_cat", "\U0001f408\u200d\u2b1b", 568, "13.0", None),
    ("lion", "\U0001f981", 569, "1.0", None),
    ("tiger_face", "\U0001f42f", 570, "0.6", None),
    ("tiger", "\U0001f405", 571, "1.0", None),
    ("leopard", "\U0001f406", 572, "1.0", None),
    ("horse_face", "\U0001f434", 573, "0.6", None),
    ("moose", "\U0001face", 574, "15.0", None),
    ("donkey", "\U0001facf", 575, "15.0", None),
    ("horse", "\U0001f40e", 576, "0.6", None),
    ("unicorn", "\U0001f984", 577, "1.0", None),
    ("zebra", "\U0001f993", 578, "5.0", None),
    ("deer", "\U0001f98c", 579, "3.0", None),
    ("bison", "\U0001f9ac", 580, "13.0", None),
    ("cow_face", "\U0001f42e", 581, "0.6", None),
    ("ox", "\U0001f402", 582, "1.0", None),
    ("water_buffalo", "\U0001f403", 583, "1.0", None),
    ("cow", "\U0001f404", 584, "1.0", None),
    ("pig_face", "\U0001f437", 585, "0.6", None),
    ("pig", "\U0001f416", 586, "1.0", None),
    ("boar", "\U0001f417", 587, "0.6", None),
    ("pig_nose", "\U0001f43d", 588, "0.6", None),
    ("ram", "\U0001f40f", 589, "1.0", None),
    ("ewe", "\U0001f411", 590, "0.6", None),
    ("goat", "\U0001f410", 591, "1.0", None),
    ("camel", "\U0001f42a", 592, "1.0", None),
    ("two_hump_camel", "\U0001f42b", 593, "0.6", None),
    ("llama", "\U0001f999", 594, "11.0", None),
    ("giraffe", "\U0001f992", 595, "5.0", None),
    ("elephant", "\U0001f418", 596, "0.6", None),
    ("mammoth", "\U0001f9a3", 597, "13.0", None),
    ("rhinoceros", "\U0001f98f", 598, "3.0", None),
    ("hippopotamus", "\U0001f99b", 599, "11.0", None),
    ("mouse_face", "\U0001f42d", 600, "0.6", None),
    ("mouse", "\U0001f401", 601, "1.0", None),
    ("rat", "\U0001f400", 602, "1.0", None),
    ("hamster", "\U0001f439", 603, "0.6", None),
    ("rabbit_face", "\U0001f430", 604, "0.6", None),
    ("rabbit", "\U0001f407", 605, "1.0", None),
    ("chipmunk", "\U0001f43f\ufe0f", 606, "0.7", None),
    ("beaver", "\U0001f9ab", 607, "13.0", None),
    ("hedgehog", "\U0001f994", 608, "5.0", None),
    ("bat", "\U0001f987", 609, "3.0", None),
    ("bear", "\U0001f43b", 610, "0.6", None),
    ("polar_bear", "\U0001f43b\u200d\u2744\ufe0f", 611, "13.0", None),
    ("koala", "\U0001f428", 612, "0.6", None),
    ("panda", "\U0001f43c", 613, "0.6", None),
    ("sloth", "\U0001f9a5", 614, "12.0", None),
    ("otter", "\U0001f9a6", 615, "12.0", None),
    ("skunk", "\U0001f9a8", 616, "12.0", None),
    ("kangaroo", "\U0001f998", 617, "11.0", None),
    ("badger", "\U0001f9a1", 618, "11.0", None),
    ("paw_prints", "\U0001f43e", 619, "0.6", None),
    ("turkey", "\U0001f983", 620, "1.0", None),
    ("chicken", "\U0001f414", 621, "0.6", None),
    ("rooster", "\U0001f413", 622, "1.0", None),
    ("hatching_chick", "\U0001f423", 623, "0.6", None),
    ("baby_chick", "\U0001f424", 624, "0.6", None),
    ("front_facing_baby_chick", "\U0001f425", 625, "0.6", None),
    ("bird", "\U0001f426", 626, "0.6", None),
    ("penguin", "\U0001f427", 627, "0.6", None),
    ("dove", "\U0001f54a\ufe0f", 628, "0.7", None),
    ("eagle", "\U0001f985", 629, "3.0", None),
    ("duck", "\U0001f986", 630, "3.0", None),
    ("swan", "\U0001f9a2", 631, "11.0", None),
    ("owl", "\U0001f989", 632, "3.0", None),
    ("dodo", "\U0001f9a4", 633, "13.0", None),
    ("feather", "\U0001fab6", 634, "13.0", None),
    ("flamingo", "\U0001f9a9", 635, "12.0", None),
    ("peacock", "\U0001f99a", 636, "11.0", None),
    ("parrot", "\U0001f99c", 637, "11.0", None),
    ("wing", "\U0001fabd", 638, "15.0", None),
    ("black_bird", "\U0001f426\u200d\u2b1b", 639, "15.0", None),
    ("goose", "\U0001fabf", 640, "15.0", None),
    ("phoenix", "\U0001f426\u200d\U0001f525", 641, "15.1", None),
    ("frog", "\U0001f438", 642, "0.6", None),
    ("crocodile", "\U0001f40a", 643, "1.0", None),
    ("turtle", "\U0001f422", 644, "0.6", None),
    ("lizard", "\U0001f98e", 645, "3.0", None),
    ("snake", "\U0001f40d", 646, "0.6", None),
    ("dragon_face", "\U0001f432", 647, "0.6", None),
    ("dragon", "\U0001f409", 648, "1.0", None),
    ("sauropod", "\U0001f995", 649, "5.0", None),
    ("t_rex", "\U0001f996", 650, "5.0", None),
    ("spouting_whale", "\U0001f433", 651, "0.6", None),
    ("whale", "\U0001f40b", 652, "1.0", None),
    ("dolphin", "\U0001f42c", 653, "0.6", None),
    ("seal", "\U0001f9ad", 654, "13.0", None),
    ("fish", "\U0001f41f", 655, "0.6", None),
    ("tropical_fish", "\U0001f420", 656, "0.6", None),
    ("blowfish", "\U0001f421", 657, "0.6", None),
    ("shark", "\U0001f988", 658, "3.0", None),
    ("octopus", "\U0001f419", 659, "0.6", None),
    ("spiral_shell", "\U0001f41a", 660, "0.6", None),
    ("coral", "\U0001fab8", 661, "14.0", None),
    ("jellyfish", "\U0001fabc", 662, "15.0", None),
    ("snail", "\U0001f40c", 663, "0.6", None),
    ("butterfly", "\U0001f98b", 664, "3.0", None),
    ("bug", "\U0001f41b", 665, "0.6", None),
    ("ant", "\U0001f41c", 666, "0.6", None),
    ("honeybee", "\U0001f41d", 667, "0.6", None),
    ("beetle", "\U0001fab2", 668, "13.0", None),
    ("lady_beetle", "\U0001f41e", 669, "0.6", None),
    ("cricket", "\U0001f997", 670, "5.0", None),
    ("cockroach", "\U0001fab3", 671, "13.0", None),
    ("spider", "\U0001f577\ufe0f", 672, "0.7", None),
    ("spider_web", "\U0001f578\ufe0f", 673, "0.7", None),
    ("scorpion", "\U0001f982", 674, "1.0", None),
    ("mosquito", "\U0001f99f", 675, "11.0", None),
    ("fly", "\U0001fab0", 676, "13.0", None),
    ("worm", "\U0001fab1", 677, "13.0", None),
    ("microbe", "\U0001f9a0", 678, "11.0", None),
    ("bouquet", "\U0001f490", 679, "0.6", None),
    ("cherry_blossom", "\U0001f338", 680, "0.6", None),
    ("white_flower", "\U0001f4ae", 681, "0.6", None),
    ("lotus", "\U0001fab7", 682, "14.0", None),
    ("rosette", "\U0001f3f5\ufe0f", 683, "0.7", None),
    ("rose", "\U0001f339", 684, "0.6", None),
    ("wilted_flower", "\U0001f940", 685, "3.0", None),
    ("hibiscus", "\U0001f33a", 686, "0.6", None),
    ("sunflower", "\U0001f33b", 687, "0.6", None),
    ("blossom", "\U0001f33c", 688, "0.6", None),
    ("tulip", "\U0001f337", 689, "0.6", None),
    ("hyacinth", "\U0001fabb", 690, "15.0", None),
    ("seedling", "\U0001f331", 691, "0.6", None),
    ("potted_plant", "\U0001fab4", 692, "13.0", None),
    ("evergreen_tree", "\U0001f332", 693, "1.0", None),
    ("deciduous_tree", "\U0001f333", 694, "1.0", None),
    ("palm_tree", "\U0001f334", 695, "0.6", None),
    ("cactus", "\U0001f335", 696, "0.6", None),
    ("sheaf_of_rice", "\U0001f33e", 697, "0.6", None),
    ("herb", "\U0001f33f", 698, "0.6", None),
    ("shamrock", "\u2618\ufe0f", 699, "1.0", None),
    ("four_leaf_clover", "\U0001f340", 700, "0.6", None),
    ("maple_leaf", "\U0001f341", 701, "0.6", None),
    ("fallen_leaf", "\U0001f342", 702, "0.6", None),
    ("leaf_fluttering_in_wind", "\U0001f343", 703, "0.6", None),
    ("empty_nest", "\U0001fab9", 704, "14.0", None),
    ("nest_with_eggs", "\U0001faba", 705, "14.0", None),
    ("mushroom", "\U0001f344", 706, "0.6", None),
    # food-drink
    ("grapes", "\U0001f347", 707, "0.6", None),
    ("melon", "\U0001f348", 708, "0.6", None),
    ("watermelon", "\U0001f349", 709, "0.6", None),
    ("tangerine", "\U0001f34a", 710, "0.6", None),
    ("lemon", "\U0001f34b", 711, "1.0", None),
    ("lime", "\U0001f34b\u200d\U0001f7e9", 712, "15.1", None),
    ("banana", "\U0001f34c", 713, "0.6", None),
    ("pineapple", "\U0001f34d", 714, "0.6", None),
    ("mango", "\U0001f96d", 715, "11.0", None),
    ("red_apple", "\U0001f34e", 716, "0.6", None),
    ("green_apple", "\U0001f34f", 717, "0.6", None),
    ("pear", "\U0001f350", 718, "1.0", None),
    ("peach", "\U0001f351", 719, "0.6", None),
    ("cherries", "\U0001f352", 720, "0.6", None),
    ("strawberry", "\U0001f353", 721, "0.6", None),
    ("blueberries", "\U0001fad0", 722, "13.0", None),
    ("kiwi_fruit", "\U0001f95d", 723, "3.0", None),
    ("tomato", "\U0001f345", 724, "0.6", None),
    ("olive", "\U0001fad2", 725, "13.0", None),
    ("coconut", "\U0001f965", 726, "5.0", None),
    ("avocado", "\U0001f951", 727, "3.0", None),
    ("eggplant", "\U0001f346", 728, "0.6", None),
    ("potato", "\U0001f954", 729, "3.0", None),
    ("carrot", "\U0001f955", 730, "3.0", None),
    ("ear_of_corn", "\U0001f33d", 731, "0.6", None),
    ("hot_pepper", "\U0001f336\ufe0f", 732, "0.7", None),
    ("bell_pepper", "\U0001fad1", 733, "13.0", None),
    ("cucumber", "\U0001f952", 734, "3.0", None),
    ("leafy_green", "\U0001f96c", 735, "11.0", None),
    ("broccoli", "\U0001f966", 736, "5.0", None),
    ("garlic", "\U0001f9c4", 737, "12.0", None),
    ("onion", "\U0001f9c5", 738, "12.0", None),
    ("peanuts", "\U0001f95c", 739, "3.0", None),
    ("beans", "\U0001fad8", 740, "14.0", None),
    ("chestnut", "\U0001f330", 741, "0.6", None),
    ("ginger_root", "\U0001fada", 742, "15.0", None),
    ("pea_pod", "\U0001fadb", 743, "15.0", None),
    ("brown_mushroom", "\U0001f344\u200d\U0001f7eb", 744, "15.1", None),
    ("bread", "\U0001f35e", 745, "0.6", None),
    ("croissant", "\U0001f950", 746, "3.0", None),
    ("baguette_bread", "\U0001f956", 747, "3.0", None),
    ("flatbread", "\U0001fad3", 748, "13.0", None),
    ("pretzel", "\U0001f968", 749, "5.0", None),
    ("bagel", "\U0001f96f", 750, "11.0", None),
    ("pancakes", "\U0001f95e", 751, "3.0", None),
    ("waffle", "\U0001f9c7", 752, "12.0", None),
    ("cheese_wedge", "\U0001f9c0", 753, "1.0", None),
    ("meat_on_bone", "\U0001f356", 754, "0.6", None),
    ("poultry_leg", "\U0001f357", 755, "0.6", None),
    ("cut_of_meat", "\U0001f969", 756, "5.0", None),
    ("bacon", "\U0001f953", 757, "3.0", None),
    ("hamburger", "\U0001f354", 758, "0.6", None),
    ("french_fries", "\U0001f35f", 759, "0.6", None),
    ("pizza", "\U0001f355", 760, "0.6", None),
    ("hot_dog", "\U0001f32d", 761, "1.0", None),
    ("sandwich", "\U0001f96a", 762, "5.0", None),
    ("taco", "\U0001f32e", 763, "1.0", None),
    ("burrito", "\U0001f32f", 764, "1.0", None),
    ("tamale", "\U0001fad4", 765, "13.0", None),
    ("stuffed_flatbread", "\U0001f959", 766, "3.0", None),
    ("falafel", "\U0001f9c6", 767, "12.0", None),
    ("egg", "\U0001f95a", 768, "3.0", None),
    ("cooking", "\U0001f373", 769, "0.6", None),
    ("shallow_pan_of_food", "\U0001f958", 770, "3.0", None),
    ("pot_of_food", "\U0001f372", 771, "0.6", None),
    ("fondue", "\U0001fad5", 772, "13.0", None),
    ("bowl_with_spoon", "\U0001f963", 773, "5.0", None),
    ("green_salad", "\U0001f957", 774, "3.0", None),
    ("popcorn", "\U0001f37f", 775, "1.0", None),
    ("butter", "\U0001f9c8", 776, "12.0", None),
    ("salt", "\U0001f9c2", 777, "11.0", None),
    ("canned_food", "\U0001f96b", 778, "5.0", None),
    ("bento_box", "\U0001f371", 779, "0.6", None),
    ("rice_cracker", "\U0001f358", 780, "0.6", None),
    ("rice_ball", "\U0001f359", 781, "0.6", None),
    ("cooked_rice", "\U0001f35a", 782, "0.6", None),
    ("curry_rice", "\U0001f35b", 783, "0.6", None),
    ("steaming_bowl", "\U0001f35c", 784, "0.6", None),
    ("spaghetti", "\U0001f35d", 785, "0.6", None),
    ("roasted_sweet_potato", "\U0001f360", 786, "0.6", None),
    ("oden", "\U0001f362", 787, "0.6", None),
    ("sushi", "\U0001f363", 788, "0.6", None),
    ("fried_shrimp", "\U0001f364", 789, "0.6", None),
    ("fish_cake_with_swirl", "\U0001f365", 790, "0.6", None),
    ("moon_cake", "\U0001f96e", 791, "11.0", None),
    ("dango", "\U0001f361", 792, "0.6", None),
    ("dumpling", "\U0001f95f", 793, "5.0", None),
    ("fortune_cookie", "\U0001f960", 794, "5.0", None),
    ("takeout_box", "\U0001f961", 795, "5.0", None),
    ("crab", "\U0001f980", 796, "1.0", None),
    ("lobster", "\U0001f99e", 797, "11.0", None),
    ("shrimp", "\U0001f990", 798, "3.0", None),
    ("squid", "\U0001f991", 799, "3.0", None),
    ("oyster", "\U0001f9aa", 800, "12.0", None),
    ("soft_ice_cream", "\U0001f366", 801, "0.6", None),
    ("shaved_ice", "\U0001f367", 802, "0.6", None),
    ("ice_cream", "\U0001f368", 803, "0.6", None),
    ("doughnut", "\U0001f369", 804, "0.6", None),
    ("cookie", "\U0001f36a", 805, "0.6", None),
    ("birthday_cake", "\U0001f382", 806, "0.6", None),
    ("shortcake", "\U0001f370", 807, "0.6", None),
    ("cupcake", "\U0001f9c1", 808, "11.0", None),
    ("pie", "\U0001f967", 809, "5.0", None),
    ("chocolate_bar", "\U0001f36b", 810, "0.6", None),
    ("candy", "\U0001f36c", 811, "0.6", None),
    ("lollipop", "\U0001f36d", 812, "0.6", None),
    ("custard", "\U0001f36e", 813, "0.6", None),
    ("honey_pot", "\U0001f36f", 814, "0.6", None),
    ("baby_bottle", "\U0001f37c", 815, "1.0", None),
    ("glass_of_milk", "\U0001f95b", 816, "3.0", None),
    ("hot_beverage", "\u2615", 817, "0.6", None),
    ("teapot", "\U0001fad6", 818, "13.0", None),
    ("teacup_without_handle", "\U0001f375", 819, "0.6", None),
    ("sake", "\U0001f376", 820, "0.6", None),
    ("bottle_with_popping_cork", "\U0001f37e", 821, "1.0", None),
    ("wine_glass", "\U0001f377", 822, "0.6", None),
    ("cocktail_glass", "\U0001f378", 823, "0.6", None),
    ("tropical_drink", "\U0001f379", 824, "0.6", None),
    ("beer_mug", "\U0001f37a", 825, "0.6", None),
    ("clinking_beer_mugs", "\U0001f37b", 826, "0.6", None),
    ("clinking_glasses", "\U0001f942", 827, "3.0", None),
    ("tumbler_glass", "\U0001f943", 828, "3.0", None),
    ("pouring_liquid", "\U0001fad7", 829, "14.0", None),
    ("cup_with_straw", "\U0001f964", 830, "5.0", None),
    ("bubble_tea", "\U0001f9cb", 831, "13.0", None),
    ("beverage_box", "\U0001f9c3", 832, "12.0", None),
    ("mate", "\U0001f9c9", 833, "12.0", None),
    ("ice", "\U0001f9ca", 834, "12.0", None),
    ("chopsticks", "\U0001f962", 835, "5.0", None),
    ("fork_and_knife_with_plate", "\U0001f37d\ufe0f", 836, "0.7", None),
    ("fork_and_knife", "\U0001f374", 837, "0.6", None),
    ("spoon", "\U0001f944", 838, "3.0", None),
    ("kitchen_knife", "\U0001f52a", 839, "0.6", None),
    ("jar", "\U0001fad9", 840, "14.0", None),
    ("amphora", "\U0001f3fa", 841, "1.0", None),
    # travel-places
    ("globe_showing_europe_africa", "\U0001f30d", 842, "0.7", None),
    ("globe_showing_americas", "\U0001f30e", 843, "0.7", None),
    ("globe_showing_asia_australia", "\U0001f30f", 844, "0.6", None),
    ("globe_with_meridians", "\U0001f310", 845, "1.0", None),
    ("world_map", "\U0001f5fa\ufe0f", 846, "0.7", None),
    ("map_of_japan", "\U0001f5fe", 847, "0.6", None),
    ("compass", "\U0001f9ed", 848, "11.0", None),
    ("snow_capped_mountain", "\U0001f3d4\ufe0f", 849, "0.7", None),
    ("mountain", "\u26f0\ufe0f", 850, "0.7", None),
    ("volcano", "\U0001f30b", 851, "0.6", None),
    ("mount_fuji", "\U0001f5fb", 852, "0.6", None),
    ("camping", "\U0001f3d5\ufe0f", 853, "0.7", None),
    ("beach_with_umbrella", "\U0001f3d6\ufe0f", 854, "0.7", None),
    ("desert", "\U0001f3dc\ufe0f", 855, "0.7", None),
    ("desert_island", "\U0001f3dd\ufe0f", 856, "0.7", None),
    ("national_park", "\U0001f3de\ufe0f", 857, "0.7", None),
    ("stadium", "\U0001f3df\ufe0f", 858, "0.7", None),
    ("classical_building", "\U0001f3db\ufe0f", 859, "0.7", None),
    ("building_construction", "\U0001f3d7\ufe0f", 860, "0.7", None),
    ("brick", "\U0001f9f1", 861, "11.0", None),
    ("rock", "\U0001faa8", 862, "13.0", None),
    ("wood", "\U0001fab5", 863, "13.0", None),
    ("hut", "\U0001f6d6", 864, "13.0", None),
    ("houses", "\U0001f3d8\ufe0f", 865, "0.7", None),
    ("derelict_house", "\U0001f3da\ufe0f", 866, "0.7", None),
    ("house", "\U0001f3e0", 867, "0.6", None),
    ("house_with_garden", "\U0001f3e1", 868, "0.6", None),
    ("office_building", "\U0001f3e2", 869, "0.6", None),
    ("japanese_post_office", "\U0001f3e3", 870, "0.6", None),
    ("post_office", "\U0001f3e4", 871, "1.0", None),
    ("hospital", "\U0001f3e5", 872, "0.6", None),
    ("bank", "\U0001f3e6", 873, "0.6", None),
    ("hotel", "\U0001f3e8", 874, "0.6", None),
    ("love_hotel", "\U0001f3e9", 875, "0.6", None),
    ("convenience_store", "\U0001f3ea", 876, "0.6", None),
    ("school", "\U0001f3eb", 877, "0.6", None),
    ("department_store", "\U0001f3ec", 878, "0.6", None),
    ("factory", "\U0001f3ed", 879, "0.6", None),
    ("japanese_castle", "\U0001f3ef", 880, "0.6", None),
    ("castle", "\U0001f3f0", 881, "0.6", None),
    ("wedding", "\U0001f492", 882, "0.6", None),
    ("tokyo_tower", "\U0001f5fc", 883, "0.6", None),
    ("statue_of_liberty", "\U0001f5fd", 884, "0.6", None),
    ("church", "\u26ea", 885, "0.6", None),
    ("mosque", "\U0001f54c", 886, "1.0", None),
    ("hindu_temple", "\U0001f6d5", 887, "12.0", None),
    ("synagogue", "\U0001f54d", 888, "1.0", None),
    ("shinto_shrine", "\u26e9\ufe0f", 889, "0.7", None),
    ("kaaba", "\U0001f54b", 890, "1.0", None),
    ("fountain", "\u26f2", 891, "0.6", None),
    ("tent", "\u26fa", 892, "0.6", None),
    ("foggy", "\U0001f301", 893, "0.6", None),
    ("night_with_stars", "\U0001f303", 894, "0.6", None),
    ("cityscape", "\U0001f3d9\ufe0f", 895, "0.7", None),
    ("sunrise_over_mountains", "\U0001f304", 896, "0.6", None),
    ("sunrise", "\U0001f305", 897, "0.6", None),
    ("cityscape_at_dusk", "\U0001f306", 898, "0.6", None),
    ("sunset", "\U0001f307", 899, "0.6", None),
    ("bridge_at_night", "\U0001f309", 900, "0.6", None),
    ("hot_springs", "\u2668\ufe0f", 901, "0.6", None),
    ("carousel_horse", "\U0001f3a0", 902, "0.6", None),
    ("playground_slide", "\U0001f6dd", 903, "14.0", None),
    ("ferris_wheel", "\U0001f3a1", 904, "0.6", None),
    ("roller_coaster", "\U0001f3a2", 905, "0.6", None),
    ("barber_pole", "\U0001f488", 906, "0.6", None),
    ("circus_tent", "\U0001f3aa", 907, "0.6", None),
    ("locomotive", "\U0001f682", 908, "1.0", None),
    ("railway_car", "\U0001f683", 909, "0.6", None),
    ("high_speed_train", "\U0001f684", 910, "0.6", None),
    ("bullet_train", "\U0001f685", 911, "0.6", None),
    ("train", "\U0001f686", 912, "1.0", None),
    ("metro", "\U0001f687", 913, "0.6", None),
    ("light_rail", "\U0001f688", 914, "1.0", None),
    ("station", "\U0001f689", 915, "0.6", None),
    ("tram", "\U0001f68a", 916, "1.0", None),
    ("monorail", "\U0001f69d", 917, "1.0", None),
    ("mountain_railway", "\U0001f69e", 918, "1.0", None),
    ("tram_car", "\U0001f68b", 919, "1.0", None),
    ("bus", "\U0001f68c", 920, "0.6", None),
    ("oncoming_bus", "\U0001f68d", 921, "0.7", None),
    ("trolleybus", "\U0001f68e", 922, "1.0", None),
    ("minibus", "\U0001f690", 923, "1.0", None),
    ("ambulance", "\U0001f691", 924, "0.6", None),
    ("fire_engine", "\U0001f692", 925, "0.6", None),
    ("police_car", "\U0001f693", 926, "0.6", None),
    ("oncoming_police_car", "\U0001f694", 927, "0.7", None),
    ("taxi", "\U0001f695", 928, "0.6", None),
    ("oncoming_taxi", "\U0001f696", 929, "1.0", None),
    ("automobile", "\U0001f697", 930, "0.6", None),
    ("oncoming_automobile", "\U0001f698", 931, "0.7", None),
    ("sport_utility_vehicle", "\U0001f699", 932, "0.6", None),
    ("pickup_truck", "\U0001f6fb", 933, "13.0", None),
    ("delivery_truck", "\U0001f69a", 934, "0.6", None),
    ("articulated_lorry", "\U0001f69b", 935, "1.0", None),
    ("tractor", "\U0001f69c", 936, "1.0", None),
    ("racing_car", "\U0001f3ce\ufe0f", 937, "0.7", None),
    ("motorcycle", "\U0001f3cd\ufe0f", 938, "0.7", None),
    ("motor_scooter", "\U0001f6f5", 939, "3.0", None),
    ("manual_wheelchair", "\U0001f9bd", 940, "12.0", None),
    ("motorized_wheelchair", "\U0001f9bc", 941, "12.0", None),
    ("auto_rickshaw", "\U0001f6fa", 942, "12.0", None),
    ("bicycle", "\U0001f6b2", 943, "0.6", None),
    ("kick_scooter", "\U0001f6f4", 944, "3.0", None),
    ("skateboard", "\U0001f6f9", 945, "11.0", None),
    ("roller_skate", "\U0001f6fc", 946, "13.0", None),
    ("bus_stop", "\U0001f68f", 947, "0.6", None),
    ("motorway", "\U0001f6e3\ufe0f", 948, "0.7", None),
    ("railway_track", "\U0001f6e4\ufe0f", 949, "0.7", None),
    ("oil_drum", "\U0001f6e2\ufe0f", 950, "0.7", None),
    ("fuel_pump", "\u26fd", 951, "0.6", None),
    ("wheel", "\U0001f6de", 952, "14.0", None),
    ("police_car_light", "\U0001f6a8", 953, "0.6", None),
    ("horizontal_traffic_light", "\U0001f6a5", 954, "0.6", None),
    ("vertical_traffic_light", "\U0001f6a6", 955, "1.0", None),
    ("stop_sign", "\U0001f6d1", 956, "3.0", None),
    ("construction", "\U0001f6a7", 957, "0.6", None),
    ("anchor", "\u2693", 958, "0.6", None),
    ("ring_buoy", "\U0001f6df", 959, "14.0", None),
    ("sailboat", "\u26f5", 960, "0.6", None),
    ("canoe", "\U0001f6f6", 961, "3.0", None),
    ("speedboat", "\U0001f6a4", 962, "0.6", None),
    ("passenger_ship", "\U0001f6f3\ufe0f", 963, "0.7", None),
    ("ferry", "\u26f4\ufe0f", 964, "0.7", None),
    ("motor_boat", "\U0001f6e5\ufe0f", 965, "0.7", None),
    ("ship", "\U0001f6a2", 966, "0.6", None),
    ("airplane", "\u2708\ufe0f", 967, "0.6", None),
    ("small_airplane", "\U0001f6e9\ufe0f", 968, "0.7", None),
    ("airplane_departure", "\U0001f6eb", 969, "1.0", None),
    ("airplane_arrival", "\U0001f6ec", 970, "1.0", None),
    ("parachute", "\U0001fa82", 971, "12.0", None),
    ("seat", "\U0001f4ba", 972, "0.6", None),
    ("helicopter", "\U0001f681", 973, "1.0", None),
    ("suspension_railway", "\U0001f69f", 974, "1.0", None),
    ("mountain_cableway", "\U0001f6a0", 975, "1.0", None),
    ("aerial_tramway", "\U0001f6a1", 976, "1.0", None),
    ("satellite", "\U0001f6f0\ufe0f", 977, "0.7", None),
    ("rocket", "\U0001f680", 978, "0.6", None),
    ("flying_saucer", "\U0001f6f8", 979, "5.0", None),
    ("bellhop_bell", "\U0001f6ce\ufe0f", 980, "0.7", None),
    ("luggage", "\U0001f9f3", 981, "11.0", None),
    ("hourglass_done", "\u231b", 982, "0.6", None),
    ("hourglass_not_done", "\u23f3", 983, "0.6", None),
    ("watch", "\u231a", 984, "0.6", None),
    ("alarm_clock", "\u23f0", 985, "0.6", None),
    ("stopwatch", "\u23f1\ufe0f", 986, "1.0", None),
    ("timer_clock", "\u23f2\ufe0f", 987, "1.0", None),
    ("mantelpiece_clock", "\U0001f570\ufe0f", 988, "0.7", None),
    ("twelve_oclock", "\U0001f55b", 989, "0.6", None),
    ("twelve_thirty", "\U0001f567", 990, "0.7", None),
    ("one_oclock", "\U0001f550", 991, "0.6", None),
    ("one_thirty", "\U0001f55c", 992, "0.7", None),
    ("two_oclock", "\U0001f551", 993, "0.6", None),
    ("two_thirty", "\U0001f55d", 994, "0.7", None),
    ("three_oclock", "\U0001f552", 995, "0.6", None),
    ("three_thirty", "\U0001f55e", 996, "0.7", None),
    ("four_oclock", "\U0001f553", 997, "0.6", None),
    ("four_thirty", "\U0001f55f", 998, "0.7", None),
    ("five_oclock", "\U0001f554", 999, "0.6", None),
    ("five_thirty", "\U0001f560", 1000, "0.7", None),
    ("six_oclock", "\U0001f555", 1001, "0.6", None),
    ("six_thirty", "\U0001f561", 1002, "0.7", None),
    ("seven_oclock", "\U0001f556", 1003, "0.6", None),
    ("seven_thirty", "\U0001f562", 1004, "0.7", None),
    ("eight_oclock", "\U0001f557", 1005, "0.6", None),
    ("eight_thirty", "\U0001f563", 1006, "0.7", None),
    ("nine_oclock", "\U0001f558", 1007, "0.6", None),
    ("nine_thirty", "\U0001f564", 1008, "0.7", None),
    ("ten_oclock", "\U0001f559", 1009, "0.6", None),
    ("ten_thirty", "\U0001f565", 1010, "0.7", None),
    ("eleven_oclock", "\U0001f55a", 1011, "0.6", None),
    ("eleven_thirty", "\U0001f566", 1012, "0.7", None),
    ("new_moon", "\U0001f311", 1013, "0.6", None),
    ("waxing_crescent_moon", "\U0001f312", 1014, "1.0", None),
    ("first_quarter_moon", "\U0001f313", 1015, "0.6", None),
    ("waxing_gibbous_moon", "\U0001f314", 1016, "0.6", None),
    ("full_moon", "\U0001f315", 1017, "0.6", None),
    ("waning_gibbous_moon", "\U0001f316", 1018, "1.0", None),
    ("last_quarter_moon", "\U0001f317", 1019, "1.0", None),
    ("waning_crescent_moon", "\U0001f318", 1020, "1.0", None),
    ("crescent_moon", "\U0001f319", 1021, "0.6", None),
    ("new_moon_face", "\U0001f31a", 1022, "1.0", None),
    ("first_quarter_moon_face", "\U0001f31b", 1023, "0.6", None),
    ("last_quarter_moon_face", "\U0001f31c", 1024, "0.7", None),
    ("thermometer", "\U0001f321\ufe0f", 1025, "0.7", None),
    ("sun", "\u2600\ufe0f", 1026, "0.6", None),
    ("full_moon_face", "\U0001f31d", 1027, "1.0", None),
    ("sun_with_face", "\U0001f31e", 1028, "1.0", None),
    ("ringed_planet", "\U0001fa90", 1029, "12.0", None),
    ("star", "\u2b50", 1030, "0.6", None),
    ("glowing_star", "\U0001f31f", 1031, "0.6", None),
    ("shooting_star", "\U0001f320", 1032, "0.6", None),
    ("milky_way", "\U0001f30c", 1033, "0.6", None),
    ("cloud", "\u2601\ufe0f", 1034, "0.6", None),
    ("sun_behind_cloud", "\u26c5", 1035, "0.6", None),
    ("cloud_with_lightning_and_rain", "\u26c8\ufe0f", 1036, "0.7", None),
    ("sun_behind_small_cloud", "\U0001f324\ufe0f", 1037, "0.7", None),
    ("sun_behind_large_cloud", "\U0001f325\ufe0f", 1038, "0.7", None),
    ("sun_behind_rain_cloud", "\U0001f326\ufe0f", 1039, "0.7", None),
    ("cloud_with_rain", "\U0001f327\ufe0f", 1040, "0.7", None),
    ("cloud_with_snow", "\U0001f328\ufe0f", 1041, "0.7", None),
    ("cloud_with_lightning", "\U0001f329\ufe0f", 1042, "0.7", None),
    ("tornado", "\U0001f32a\ufe0f", 1043, "0.7", None),
    ("fog", "\U0001f32b\ufe0f", 1044, "0.7", None),
    ("wind_face", "\U0001f32c\ufe0f", 1045, "0.7", None),
    ("cyclone", "\U0001f300", 1046, "0.6", None),
    ("rainbow", "\U0001f308", 1047, "0.6", None),
    ("closed_umbrella", "\U0001f302", 1048, "0.6", None),
    ("umbrella", "\u2602\ufe0f", 1049, "0.7", None),
    ("umbrella_with_rain_drops", "\u2614", 1050, "0.6", None),
    ("umbrella_on_ground", "\u26f1\ufe0f", 1051, "0.7", None),
    ("high_voltage", "\u26a1", 1052, "0.6", None),
    ("snowflake", "\u2744\ufe0f", 1053, "0.6", None),
    ("snowman", "\u2603\ufe0f", 1054, "0.7", None),
    ("snowman_without_snow", "\u26c4", 1055, "0.6", None),
    ("comet", "\u2604\ufe0f", 1056, "1.0", None),
    ("fire", "\U0001f525", 1057, "0.6", None),
    ("droplet", "\U0001f4a7", 1058, "0.6", None),
    ("water_wave", "\U0001f30a", 1059, "0.6", None),
    # activities
    ("jack_o_lantern", "\U0001f383", 1060, "0.6", None),
    ("christmas_tree", "\U0001f384", 1061, "0.6", None),
    ("fireworks", "\U0001f386", 1062, "0.6", None),
    ("sparkler", "\U0001f387", 1063, "0.6", None),
    ("firecracker", "\U0001f9e8", 1064, "11.0", None),
    ("sparkles", "\u2728", 1065, "0.6", None),
    ("balloon", "\U0001f388", 1066, "0.6", None),
    ("party_popper", "\U0001f389", 1067, "0.6", None),
    ("confetti_ball", "\U0001f38a", 1068, "0.6", None),
    ("tanabata_tree", "\U0001f38b", 1069, "0.6", None),
    ("pine_decoration", "\U0001f38d", 1070, "0.6", None),
    ("japanese_dolls", "\U0001f38e", 1071, "0.6", None),
    ("carp_streamer", "\U0001f38f", 1072, "0.6", None),
    ("wind_chime", "\U0001f390", 1073, "0.6", None),
    ("moon_viewing_ceremony", "\U0001f391", 1074, "0.6", None),
    ("red_envelope", "\U0001f9e7", 1075, "11.0", None),
    ("ribbon", "\U0001f380", 1076, "0.6", None),
    ("wrapped_gift", "\U0001f381", 1077, "0.6", None),
    ("reminder_ribbon", "\U0001f397\ufe0f", 1078, "0.7", None),
    ("admission_tickets", "\U0001f39f\ufe0f", 1079, "0.7", None),
    ("ticket", "\U0001f3ab", 1080, "0.6", None),
    ("military_medal", "\U0001f396\ufe0f", 1081, "0.7", None),
    ("trophy", "\U0001f3c6", 1082, "0.6", None),
    ("sports_medal", "\U0001f3c5", 1083, "1.0", None),
    ("1st_place_medal", "\U0001f947", 1084, "3.0", None),
    ("2nd_place_medal", "\U0001f948", 1085, "3.0", None),
    ("3rd_place_medal", "\U0001f949", 1086, "3.0", None),
    ("soccer_ball", "\u26bd", 1087, "0.6", None),
    ("baseball", "\u26be", 1088, "0.6", None),
    ("softball", "\U0001f94e", 1089, "11.0", None),
    ("basketball", "\U0001f3c0", 1090, "0.6", None),
    ("volleyball", "\U0001f3d0", 1091, "1.0", None),
    ("american_football", "\U0001f3c8", 1092, "0.6", None),
    ("rugby_football", "\U0001f3c9", 1093, "1.0", None),
    ("tennis", "\U0001f3be", 1094, "0.6", None),
    ("flying_disc", "\U0001f94f", 1095, "11.0", None),
    ("bowling", "\U0001f3b3", 1096, "0.6", None),
    ("cricket_game", "\U0001f3cf", 1097, "1.0", None),
    ("field_hockey", "\U0001f3d1", 1098, "1.0", None),
    ("ice_hockey", "\U0001f3d2", 1099, "1.0", None),
    ("lacrosse", "\U0001f94d", 1100, "11.0", None),
    ("ping_pong", "\U0001f3d3", 1101, "1.0", None),
    ("badminton", "\U0001f3f8", 1102, "1.0", None),
    ("boxing_glove", "\U0001f94a", 1103, "3.0", None),
    ("martial_arts_uniform", "\U0001f94b", 1104, "3.0", None),
    ("goal_net", "\U0001f945", 1105, "3.0", None),
    ("flag_in_hole", "\u26f3", 1106, "0.6", None),
    ("ice_skate", "\u26f8\ufe0f", 1107, "0.7", None),
    ("fishing_pole", "\U0001f3a3", 1108, "0.6", None),
    ("diving_mask", "\U0001f93f", 1109, "12.0", None),
    ("running_shirt", "\U0001f3bd", 1110, "0.6", None),
    ("skis", "\U0001f3bf", 1111, "0.6", None),
    ("sled", "\U0001f6f7", 1112, "5.0", None),
    ("curling_stone", "\U0001f94c", 1113, "5.0", None),
    ("bullseye", "\U0001f3af", 1114, "0.6", None),
    ("yo_yo", "\U0001fa80", 1115, "12.0", None),
    ("kite", "\U0001fa81", 1116, "12.0", None),
    ("water_pistol", "\U0001f52b", 1117, "0.6", None),
    ("pool_8_ball", "\U0001f3b1", 1118, "0.6", None),
    ("crystal_ball", "\U0001f52e", 1119, "0.6", None),
    ("magic_wand", "\U0001fa84", 1120, "13.0", None),
    ("video_game", "\U0001f3ae", 1121, "0.6", None),
    ("joystick", "\U0001f579\ufe0f", 1122, "0.7", None),
    ("slot_machine", "\U0001f3b0", 1123, "0.6", None),
    ("game_die", "\U0001f3b2", 1124, "0.6", None),
    ("puzzle_piece", "\U0001f9e9", 1125, "11.0", None),
    ("teddy_bear", "\U0001f9f8", 1126, "11.0", None),
    ("pinata", "\U0001fa85", 1127, "13.0", None),
    ("mirror_ball", "\U0001faa9", 1128, "14.0", None),
    ("nesting_dolls", "\U0001fa86", 1129, "13.0", None),
    ("spade_suit", "\u2660\ufe0f", 1130, "0.6", None),
    ("heart_suit", "\u2665\ufe0f", 1131, "0.6", None),
    ("diamond_suit", "\u2666\ufe0f", 1132, "0.6", None),
    ("club_suit", "\u2663\ufe0f", 1133, "0.6", None),
    ("chess_pawn", "\u265f\ufe0f", 1134, "11.0", None),
    ("joker", "\U0001f0cf", 1135, "0.6", None),
    ("mahjong_red_dragon", "\U0001f004", 1136, "0.6", None),
    ("flower_playing_cards", "\U0001f3b4", 1137, "0.6", None),
    ("performing_arts", "\U0001f3ad", 1138, "0.6", None),
    ("framed_picture", "\U0001f5bc\ufe0f", 1139, "0.7", None),
    ("artist_palette", "\U0001f3a8", 1140, "0.6", None),
    ("thread", "\U0001f9f5", 1141, "11.0", None),
    ("sewing_needle", "\U0001faa1", 1142, "13.0", None),
    ("yarn", "\U0001f9f6", 1143, "11.0", None),
    ("knot", "\U0001faa2", 1144, "13.0", None),
    # objects
    ("glasses", "\U0001f453", 1145, "0.6", None),
    ("sunglasses", "\U0001f576\ufe0f", 1146, "0.7", None),
    ("goggles", "\U0001f97d", 1147, "11.0", None),
    ("lab_coat", "\U0001f97c", 1148, "11.0", None),
    ("safety_vest", "\U0001f9ba", 1149, "12.0", None),
    ("necktie", "\U0001f454", 1150, "0.6", None),
    ("t_shirt", "\U0001f455", 1151, "0.6", None),
    ("jeans", "\U0001f456", 1152, "0.6", None),
    ("scarf", "\U0001f9e3", 1153, "5.0", None),
    ("gloves", "\U0001f9e4", 1154, "5.0", None),
    ("coat", "\U0001f9e5", 1155, "5.0", None),
    ("socks", "\U0001f9e6", 1156, "5.0", None),
    ("dress", "\U0001f457", 1157, "0.6", None),
    ("kimono", "\U0001f458", 1158, "0.6", None),
    ("sari", "\U0001f97b", 1159, "12.0", None),
    ("one_piece_swimsuit", "\U0001fa71", 1160, "12.0", None),
    ("briefs", "\U0001fa72", 1161, "12.0", None),
    ("shorts", "\U0001fa73", 1162, "12.0", None),
    ("bikini", "\U0001f459", 1163, "0.6", None),
    ("womans_clothes", "\U0001f45a", 1164, "0.6", None),
    ("folding_hand_fan", "\U0001faad", 1165, "15.0", None),
    ("purse", "\U0001f45b", 1166, "0.6", None),
    ("handbag", "\U0001f45c", 1167, "0.6", None),
    ("clutch_bag", "\U0001f45d", 1168, "0.6", None),
    ("shopping_bags", "\U0001f6cd\ufe0f", 1169, "0.7", None),
    ("backpack", "\U0001f392", 1170, "0.6", None),
    ("thong_sandal", "\U0001fa74", 1171, "13.0", None),
    ("mans_shoe", "\U0001f45e", 1172, "0.6", None),
    ("running_shoe", "\U0001f45f", 1173, "0.6", None),
    ("hiking_boot", "\U0001f97e", 1174, "11.0", None),
    ("flat_shoe", "\U0001f97f", 1175, "11.0", None),
    ("high_heeled_shoe", "\U0001f460", 1176, "0.6", None),
    ("womans_sandal", "\U0001f461", 1177, "0.6", None),
    ("ballet_shoes", "\U0001fa70", 1178, "12.0", None),
    ("womans_boot", "\U0001f462", 1179, "0.6", None),
    ("hair_pick", "\U0001faae", 1180, "15.0", None),
    ("crown", "\U0001f451", 1181, "0.6", None),
    ("womans_hat", "\U0001f452", 1182, "0.6", None),
    ("top_hat", "\U0001f3a9", 1183, "0.6", None),
    ("graduation_cap", "\U0001f393", 1184, "0.6", None),
    ("billed_cap", "\U0001f9e2", 1185, "5.0", None),
    ("military_helmet", "\U0001fa96", 1186, "13.0", None),
    ("rescue_workers_helmet", "\u26d1\ufe0f", 1187, "0.7", None),
    ("prayer_beads", "\U0001f4ff", 1188, "1.0", None),
    ("lipstick", "\U0001f484", 1189, "0.6", None),
    ("ring", "\U0001f48d", 1190, "0.6", None),
    ("gem_stone", "\U0001f48e", 1191, "0.6", None),
    ("muted_speaker", "\U0001f507", 1192, "1.0", None),
    ("speaker_low_volume", "\U0001f508", 1193, "0.7", None),
    ("speaker_medium_volume", "\U0001f509", 1194, "1.0", None),
    ("speaker_high_volume", "\U0001f50a", 1195, "0.6", None),
    ("loudspeaker", "\U0001f4e2", 1196, "0.6", None),
    ("megaphone", "\U0001f4e3", 1197, "0.6", None),
    ("postal_horn", "\U0001f4ef", 1198, "1.0", None),
    ("bell", "\U0001f514", 1199, "0.6", None),
    ("bell_with_slash", "\U0001f515", 1200, "1.0", None),
    ("musical_score", "\U0001f3bc", 1201, "0.6", None),
    ("musical_note", "\U0001f3b5", 1202, "0.6", None),
    ("musical_notes", "\U0001f3b6", 1203, "0.6", None),
    ("studio_microphone", "\U0001f399\ufe0f", 1204, "0.7", None),
    ("level_slider", "\U0001f39a\ufe0f", 1205, "0.7", None),
    ("control_knobs", "\U0001f39b\ufe0f", 1206, "0.7", None),
    ("microphone", "\U0001f3a4", 1207, "0.6", None),
    ("headphone", "\U0001f3a7", 1208, "0.6", None),
    ("radio", "\U0001f4fb", 1209, "0.6", None),
    ("saxophone", "\U0001f3b7", 1210, "0.6", None),
    ("accordion", "\U0001fa97", 1211, "13.0", None),
    ("guitar", "\U0001f3b8", 1212, "0.6", None),
    ("musical_keyboard", "\U0001f3b9", 1213, "0.6", None),
    ("trumpet", "\U0001f3ba", 1214, "0.6", None),
    ("violin", "\U0001f3bb", 1215, "0.6", None),
    ("banjo", "\U0001fa95", 1216, "12.0", None),
    ("drum", "\U0001f941", 1217, "3.0", None),
    ("long_drum", "\U0001fa98", 1218, "13.0", None),
    ("maracas", "\U0001fa87", 1219, "15.0", None),
    ("flute", "\U0001fa88", 1220, "15.0", None),
    ("mobile_phone", "\U0001f4f1", 1221, "0.6", None),
    ("mobile_phone_with_arrow", "\U0001f4f2", 1222, "0.6", None),
    ("telephone", "\u260e\ufe0f", 1223, "0.6", None),
    ("telephone_receiver", "\U0001f4de", 1224, "0.6", None),
    ("pager", "\U0001f4df", 1225, "0.6", None),
    ("fax_machine", "\U0001f4e0", 1226, "0.6", None),
    ("battery", "\U0001f50b", 1227, "0.6", None),
    ("low_battery", "\U0001faab", 1228, "14.0", None),
    ("electric_plug", "\U0001f50c", 1229, "0.6", None),
    ("laptop", "\U0001f4bb", 1230, "0.6", None),
    ("desktop_computer", "\U0001f5a5\ufe0f", 1231, "0.7", None),
    ("printer", "\U0001f5a8\ufe0f", 1232, "0.7", None),
    ("keyboard", "\u2328\ufe0f", 1233, "1.0", None),
    ("computer_mouse", "\U0001f5b1\ufe0f", 1234, "0.7", None),
    ("trackball", "\U0001f5b2\ufe0f", 1235, "0.7", None),
    ("computer_disk", "\U0001f4bd", 1236, "0.6", None),
    ("floppy_disk", "\U0001f4be", 1237, "0.6", None),
    ("optical_disk", "\U0001f4bf", 1238, "0.6", None),
    ("dvd", "\U0001f4c0", 1239, "0.6", None),
    ("abacus", "\U0001f9ee", 1240, "11.0", None),
    ("movie_camera", "\U0001f3a5", 1241, "0.6", None),
    ("film_frames", "\U0001f39e\ufe0f", 1242, "0.7", None),
    ("film_projector", "\U0001f4fd\ufe0f", 1243, "0.7", None),
    ("clapper_board", "\U0001f3ac", 1244, "0.6", None),
    ("television", "\U0001f4fa", 1245, "0.6", None),
    ("camera", "\U0001f4f7", 1246, "0.6", None),
    ("camera_with_flash", "\U0001f4f8", 1247, "1.0", None),
    ("video_camera", "\U0001f4f9", 1248, "0.6", None),
    ("videocassette", "\U0001f4fc", 1249, "0.6", None),
    ("magnifying_glass_tilted_left", "\U0001f50d", 1250, "0.6", None),
    ("magnifying_glass_tilted_right", "\U0001f50e", 1251, "0.6", None),
    ("candle", "\U0001f56f\ufe0f", 1252, "0.7", None),
    ("light_bulb", "\U0001f4a1", 1253, "0.6", None),
    ("flashlight", "\U0001f526", 1254, "0.6", None),
    ("red_paper_lantern", "\U0001f3ee", 1255, "0.6", None),
    ("diya_lamp", "\U0001fa94", 1256, "12.0", None),
    ("notebook_with_decorative_cover", "\U0001f4d4", 1257, "0.6", None),
    ("closed_book", "\U0001f4d5", 1258, "0.6", None),
    ("open_book", "\U0001f4d6", 1259, "0.6", None),
    ("green_book", "\U0001f4d7", 1260, "0.6", None),
    ("blue_book", "\U0001f4d8", 1261, "0.6", None),
    ("orange_book", "\U0001f4d9", 1262, "0.6", None),
    ("books", "\U0001f4da", 1263, "0.6", None),
    ("notebook", "\U0001f4d3", 1264, "0.6", None),
    ("ledger", "\U0001f4d2", 1265, "0.6", None),
    ("page_with_curl", "\U0001f4c3", 1266, "0.6", None),
    ("scroll", "\U0001f4dc", 1267, "0.6", None),
    ("page_facing_up", "\U0001f4c4", 1268, "0.6", None),
    ("newspaper", "\U0001f4f0", 1269, "0.6", None),
    ("rolled_up_newspaper", "\U0001f5de\ufe0f", 1270, "0.7", None),
    ("bookmark_tabs", "\U0001f4d1", 1271, "0.6", None),
    ("bookmark", "\U0001f516", 1272, "0.6", None),
    ("label", "\U0001f3f7\ufe0f", 1273, "0.7", None),
    ("money_bag", "\U0001f4b0", 1274, "0.6", None),
    ("coin", "\U0001fa99", 1275, "13.0", None),
    ("yen_banknote", "\U0001f4b4", 1276, "0.6", None),
    ("dollar_banknote", "\U0001f4b5", 1277, "0.6", None),
    ("euro_banknote", "\U0001f4b6", 1278, "1.0", None),
    ("pound_banknote", "\U0001f4b7", 1279, "1.0", None),
    ("money_with_wings", "\U0001f4b8", 1280, "0.6", None),
    ("credit_card", "\U0001f4b3", 1281, "0.6", None),
    ("receipt", "\U0001f9fe", 1282, "11.0", None),
    ("chart_increasing_with_yen", "\U0001f4b9", 1283, "0.6", None),
    ("envelope", "\u2709\ufe0f", 1284, "0.6", None),
    ("e_mail", "\U0001f4e7", 1285, "0.6", None),
    ("incoming_envelope", "\U0001f4e8", 1286, "0.6", None),
    ("envelope_with_arrow", "\U0001f4e9", 1287, "0.6", None),
    ("outbox_tray", "\U0001f4e4", 1288, "0.6", None),
    ("inbox_tray", "\U0001f4e5", 1289, "0.6", None),
    ("package", "\U0001f4e6", 1290, "0.6", None),
    ("closed_mailbox_with_raised_flag", "\U0001f4eb", 1291, "0.6", None),
    ("closed_mailbox_with_lowered_flag", "\U0001f4ea", 1292, "0.6", None),
    ("open_mailbox_with_raised_flag", "\U0001f4ec", 1293, "0.7", None),
    ("open_mailbox_with_lowered_flag", "\U0001f4ed", 1294, "0.7", None),
    ("postbox", "\U0001f4ee", 1295, "0.6", None),
    ("ballot_box_with_ballot", "\U0001f5f3\ufe0f", 1296, "0.7", None),
    ("pencil", "\u270f\ufe0f", 1297, "0.6", None),
    ("black_nib", "\u2712\ufe0f", 1298, "0.6", None),
    ("fountain_pen", "\U0001f58b\ufe0f", 1299, "0.7", None),
    ("pen", "\U0001f58a\ufe0f", 1300, "0.7", None),
    ("paintbrush", "\U0001f58c\ufe0f", 1301, "0.7", None),
    ("crayon", "\U0001f58d\ufe0f", 1302, "0.7", None),
    ("memo", "\U0001f4dd", 1303, "0.6", None),
    ("briefcase", "\U0001f4bc", 1304, "0.6", None),
    ("file_folder", "\U0001f4c1", 1305, "0.6", None),
    ("open_file_folder", "\U0001f4c2", 1306, "0.6", None),
    ("card_index_dividers", "\U0001f5c2\ufe0f", 1307, "0.7", None),
    ("calendar", "\U0001f4c5", 1308, "0.6", None),
    ("tear_off_calendar", "\U0001f4c6", 1309, "0.6", None),
    ("spiral_notepad", "\U0001f5d2\ufe0f", 1310, "0.7", None),
    ("spiral_calendar", "\U0001f5d3\ufe0f", 1311, "0.7", None),
    ("card_index", "\U0001f4c7", 1312, "0.6", None),
    ("chart_increasing", "\U0001f4c8", 1313, "0.6", None),
    ("chart_decreasing", "\U0001f4c9", 1314, "0.6", None),
    ("bar_chart", "\U0001f4ca", 1315, "0.6", None),
    ("clipboard", "\U0001f4cb", 1316, "0.6", None),
    ("pushpin", "\U0001f4cc", 1317, "0.6", None),
    ("round_pushpin", "\U0001f4cd", 1318, "0.6", None),
    ("paperclip", "\U0001f4ce", 1319, "0.6", None),
    ("linked_paperclips", "\U0001f587\ufe0f", 1320, "0.7", None),
    ("straight_ruler", "\U0001f4cf", 1321, "0.6", None),
    ("triangular_ruler", "\U0001f4d0", 1322, "0.6", None),
    ("scissors", "\u2702\ufe0f", 1323, "0.6", None),
    ("card_file_box", "\U0001f5c3\ufe0f", 1324, "0.7", None),
    ("file_cabinet", "\U0001f5c4\ufe0f", 1325, "0.7", None),
    ("wastebasket", "\U0001f5d1\ufe0f", 1326, "0.7", None),
    ("locked", "\U0001f512", 1327, "0.6", None),
    ("unlocked", "\U0001f513", 1328, "0.6", None),
    ("locked_with_pen", "\U0001f50f", 1329, "0.6", None),
    ("locked_with_key", "\U0001f510", 1330, "0.6", None),
    ("key", "\U0001f511", 1331, "0.6", None),
    ("old_key", "\U0001f5dd\ufe0f", 1332, "0.7", None),
    ("hammer", "\U0001f528", 1333, "0.6", None),
    ("axe", "\U0001fa93", 1334, "12.0", None),
    ("pick", "\u26cf\ufe0f", 1335, "0.7", None),
    ("hammer_and_pick", "\u2692\ufe0f", 1336, "1.0", None),
    ("hammer_and_wrench", "\U0001f6e0\ufe0f", 1337, "0.7", None),
    ("dagger", "\U0001f5e1\ufe0f", 1338, "0.7", None),
    ("crossed_swords", "\u2694\ufe0f", 1339, "1.0", None),
    ("bomb", "\U0001f4a3", 1340, "0.6", None),
    ("boomerang", "\U0001fa83", 1341, "13.0", None),
    ("bow_and_arrow", "\U0001f3f9", 1342, "1.0", None),
    ("shield", "\U0001f6e1\ufe0f", 1343, "0.7", None),
    ("carpentry_saw", "\U0001fa9a", 1344, "13.0", None),
    ("wrench", "\U0001f527", 1345, "0.6", None),
    ("screwdriver", "\U0001fa9b", 1346, "13.0", None),
    ("nut_and_bolt", "\U0001f529", 1347, "0.6", None),
    ("gear", "\u2699\ufe0f", 1348, "1.0", None),
    ("clamp", "\U0001f5dc\ufe0f", 1349, "0.7", None),
    ("balance_scale", "\u2696\ufe0f", 1350, "1.0", None),
    ("white_cane", "\U0001f9af", 1351, "12.0", None),
    ("link", "\U0001f517", 1352, "0.6", None),
    ("broken_chain", "\u26d3\ufe0f\u200d\U0001f4a5", 1353, "15.1", None),
    ("chains", "\u26d3\ufe0f", 1354, "0.7", None),
    ("hook", "\U0001fa9d", 1355, "13.0", None),
    ("toolbox", "\U0001f9f0", 1356, "11.0", None),
    ("magnet", "\U0001f9f2", 1357, "11.0", None),
    ("ladder", "\U0001fa9c", 1358, "13.0", None),
    ("alembic", "\u2697\ufe0f", 1359, "1.0", None),
    ("test_tube", "\U0001f9ea", 1360, "11.0", None),
    ("petri_dish", "\U0001f9eb", 1361, "11.0", None),
    ("dna", "\U0001f9ec", 1362, "11.0", None),
    ("microscope", "\U0001f52c", 1363, "1.0", None),
    ("telescope", "\U0001f52d", 1364, "1.0", None),
    ("satellite_antenna", "\U0001f4e1", 1365, "0.6", None),
    ("syringe", "\U0001f489", 1366, "0.6", None),
    ("drop_of_blood", "\U0001fa78", 1367, "12.0", None),
    ("pill", "\U0001f48a", 1368, "0.6", None),
    ("adhesive_bandage", "\U0001fa79", 1369, "12.0", None),
    ("crutch", "\U0001fa7c", 1370, "14.0", None),
    ("stethoscope", "\U0001fa7a", 1371, "12.0", None),
    ("x_ray", "\U0001fa7b", 1372, "14.0", None),
    ("door", "\U0001f6aa", 1373, "0.6", None),
    ("elevator", "\U0001f6d7", 1374, "13.0", None),
    ("mirror", "\U0001fa9e", 1375, "13.0", None),
    ("window", "\U0001fa9f", 1376, "13.0", None),
    ("bed", "\U0001f6cf\ufe0f", 1377, "0.7", None),
    ("couch_and_lamp", "\U0001f6cb\ufe0f", 1378, "0.7", None),
    ("chair", "\U0001fa91", 1379, "12.0", None),
    ("toilet", "\U0001f6bd", 1380, "0.6", None),
    ("plunger", "\U0001faa0", 1381, "13.0", None),
    ("shower", "\U0001f6bf", 1382, "1.0", None),
    ("bathtub", "\U0001f6c1", 1383, "1.0", None),
    ("mouse_trap", "\U0001faa4", 1384, "13.0", None),
    ("razor", "\U0001fa92", 1385, "12.0", None),
    ("lotion_bottle", "\U0001f9f4", 1386, "11.0", None),
    ("safety_pin", "\U0001f9f7", 1387, "11.0", None),
    ("broom", "\U0001f9f9", 1388, "11.0", None),
    ("basket", "\U0001f9fa", 1389, "11.0", None),
    ("roll_of_paper", "\U0001f9fb", 1390, "11.0", None),
    ("bucket", "\U0001faa3", 1391, "13.0", None),
    ("soap", "\U0001f9fc", 1392, "11.0", None),
    ("bubbles", "\U0001fae7", 1393, "14.0", None),
    ("toothbrush", "\U0001faa5", 1394, "13.0", None),
    ("sponge", "\U0001f9fd", 1395, "11.0", None),
    ("fire_extinguisher", "\U0001f9ef", 1396, "11.0", None),
    ("shopping_cart", "\U0001f6d2", 1397, "3.0", None),
    ("cigarette", "\U0001f6ac", 1398, "0.6", None),
    ("coffin", "\u26b0\ufe0f", 1399, "1.0", None),
    ("headstone", "\U0001faa6", 1400, "13.0", None),
    ("funeral_urn", "\u26b1\ufe0f", 1401, "1.0", None),
    ("nazar_amulet", "\U0001f9ff", 1402, "11.0", None),
    ("hamsa", "\U0001faac", 1403, "14.0", None),
    ("moai", "\U0001f5ff", 1404, "0.6", None),
    ("placard", "\U0001faa7", 1405, "13.0", None),
    ("identification_card", "\U0001faaa", 1406, "14.0", None),
    # symbols
    ("atm_sign", "\U0001f3e7", 1407, "0.6", None),
    ("litter_in_bin_sign", "\U0001f6ae", 1408, "1.0", None),
    ("potable_water", "\U0001f6b0", 1409, "1.0", None),
    ("wheelchair_symbol", "\u267f", 1410, "0.6", None),
    ("mens_room", "\U0001f6b9", 1411, "0.6", None),
    ("womens_room", "\U0001f6ba", 1412, "0.6", None),
    ("restroom", "\U0001f6bb", 1413, "0.6", None),
    ("baby_symbol", "\U0001f6bc", 1414, "0.6", None),
    ("water_closet", "\U0001f6be", 1415, "0.6", None),
    ("passport_control", "\U0001f6c2", 1416, "1.0", None),
    ("customs", "\U0001f6c3", 1417, "1.0", None),
    ("baggage_claim", "\U0001f6c4", 1418, "1.0", None),
    ("left_luggage", "\U0001f6c5", 1419, "1.0", None),
    ("warning", "\u26a0\ufe0f", 1420, "0.6", None),
    ("children_crossing", "\U0001f6b8", 1421, "1.0", None),
    ("no_entry", "\u26d4", 1422, "0.6", None),
    ("prohibited", "\U0001f6ab", 1423, "0.6", None),
    ("no_bicycles", "\U0001f6b3", 1424, "1.0", None),
    ("no_smoking", "\U0001f6ad", 1425, "0.6", None),
    ("no_littering", "\U0001f6af", 1426, "1.0", None),
    ("non_potable_water", "\U0001f6b1", 1427, "1.0", None),
    ("no_pedestrians", "\U0001f6b7", 1428, "1.0", None),
    ("no_mobile_phones", "\U0001f4f5", 1429, "1.0", None),
    ("no_one_under_eighteen", "\U0001f51e", 1430, "0.6", None),
    ("radioactive", "\u2622\ufe0f", 1431, "1.0", None),
    ("biohazard", "\u2623\ufe0f", 1432, "1.0", None),
    ("up_arrow", "\u2b06\ufe0f", 1433, "0.6", None),
    ("up_right_arrow", "\u2197\ufe0f", 1434, "0.6", None),
    ("right_arrow", "\u27a1\ufe0f", 1435, "0.6", None),
    ("down_right_arrow", "\u2198\ufe0f", 1436, "0.6", None),
    ("down_arrow", "\u2b07\ufe0f", 1437, "0.6", None),
    ("down_left_arrow", "\u2199\ufe0f", 1438, "0.6", None),
    ("left_arrow", "\u2b05\ufe0f", 1439, "0.6", None),
    ("up_left_arrow", "\u2196\ufe0f", 1440, "0.6", None),
    ("up_down_arrow", "\u2195\ufe0f", 1441, "0.6", None),
    ("left_right_arrow", "\u2194\ufe0f", 1442, "0.6", None),
    ("right_arrow_curving_left", "\u21a9\ufe0f", 1443, "0.6", None),
    ("left_arrow_curving_right", "\u21aa\ufe0f", 1444, "0.6", None),
    ("right_arrow_curving_up", "\u2934\ufe0f", 1445, "0.6", None),
    ("right_arrow_curving_down", "\u2935\ufe0f", 1446, "0.6", None),
    ("clockwise_vertical_arrows", "\U0001f503", 1447, "0.6", None),
    ("counterclockwise_arrows_button", "\U0001f504", 1448, "1.0", None),
    ("back_arrow", "\U0001f519", 1449, "0.6", None),
    ("end_arrow", "\U0001f51a", 1450, "0.6", None),
    ("on_arrow", "\U0001f51b", 1451, "0.6", None),
    ("soon_arrow", "\U0001f51c", 1452, "0.6", None),
    ("top_arrow", "\U0001f51d", 1453, "0.6", None),
    ("place_of_worship", "\U0001f6d0", 1454, "1.0", None),
    ("atom_symbol", "\u269b\ufe0f", 1455, "1.0", None),
    ("om", "\U0001f549\ufe0f", 1456, "0.7", None),
    ("star_of_david", "\u2721\ufe0f", 1457, "0.7", None),
    ("wheel_of_dharma", "\u2638\ufe0f", 1458, "0.7", None),
    ("yin_yang", "\u262f\ufe0f", 1459, "0.7", None),
    ("latin_cross", "\u271d\ufe0f", 1460, "0.7", None),
    ("orthodox_cross", "\u2626\ufe0f", 1461, "1.0", None),
    ("star_and_crescent", "\u262a\ufe0f", 1462, "0.7", None),
    ("peace_symbol", "\u262e\ufe0f", 1463, "1.0", None),
    ("menorah", "\U0001f54e", 1464, "1.0", None),
    ("dotted_six_pointed_star", "\U0001f52f", 1465, "0.6", None),
    ("khanda", "\U0001faaf", 1466, "15.0", None),
    ("aries", "\u2648", 1467, "0.6", None),
    ("taurus", "\u2649", 1468, "0.6", None),
    ("gemini", "\u264a", 1469, "0.6", None),
    ("cancer", "\u264b", 1470, "0.6", None),
    ("leo", "\u264c", 1471, "0.6", None),
    ("virgo", "\u264d", 1472, "0.6", None),
    ("libra", "\u264e", 1473, "0.6", None),
    ("scorpio", "\u264f", 1474, "0.6", None),
    ("sagittarius", "\u2650", 1475, "0.6", None),
    ("capricorn", "\u2651", 1476, "0.6", None),
    ("aquarius", "\u2652", 1477, "0.6", None),
    ("pisces", "\u2653", 1478, "0.6", None),
    ("ophiuchus", "\u26ce", 1479, "0.6", None),
    ("shuffle_tracks_button", "\U0001f500", 1480, "1.0", None),
    ("repeat_button", "\U0001f501", 1481, "1.0", None),
    ("repeat_single_button", "\U0001f502", 1482, "1.0", None),
    ("play_button", "\u25b6\ufe0f", 1483, "0.6", None),
    ("fast_forward_button", "\u23e9", 1484, "0.6", None),
    ("next_track_button", "\u23ed\ufe0f", 1485, "0.7", None),
    ("play_or_pause_button", "\u23ef\ufe0f", 1486, "1.0", None),
    ("reverse_button", "\u25c0\ufe0f", 1487, "0.6", None),
    ("fast_reverse_button", "\u23ea", 1488, "0.6", None),
    ("last_track_button", "\u23ee\ufe0f", 1489, "0.7", None),
    ("upwards_button", "\U0001f53c", 1490, "0.6", None),
    ("fast_up_button", "\u23eb", 1491, "0.6", None),
    ("downwards_button", "\U0001f53d", 1492, "0.6", None),
    ("fast_down_button", "\u23ec", 1493, "0.6", None),
    ("pause_button", "\u23f8\ufe0f", 1494, "0.7", None),
    ("stop_button", "\u23f9\ufe0f", 1495, "0.7", None),
    ("record_button", "\u23fa\ufe0f", 1496, "0.7", None),
    ("eject_button", "\u23cf\ufe0f", 1497, "1.0", None),
    ("cinema", "\U0001f3a6", 1498, "0.6", None),
    ("dim_button", "\U0001f505", 1499, "1.0", None),
    ("bright_button", "\U0001f506", 1500, "1.0", None),
    ("antenna_bars", "\U0001f4f6", 1501, "0.6", None),
    ("wireless", "\U0001f6dc", 1502, "15.0", None),
    ("vibration_mode", "\U0001f4f3", 1503, "0.6", None),
    ("mobile_phone_off", "\U0001f4f4", 1504, "0.6", None),
    ("female_sign", "\u2640\ufe0f", 1505, "4.0", None),
    ("male_sign", "\u2642\ufe0f", 1506, "4.0", None),
    ("transgender_symbol", "\u26a7\ufe0f", 1507, "13.0", None),
    ("multiply", "\u2716\ufe0f", 1508, "0.6", None),
    ("plus", "\u2795", 1509, "0.6", None),
    ("minus", "\u2796", 1510, "0.6", None),
    ("divide", "\u2797", 1511, "0.6", None),
    ("heavy_equals_sign", "\U0001f7f0", 1512, "14.0", None),
    ("infinity", "\u267e\ufe0f", 1513, "11.0", None),
    ("double_exclamation_mark", "\u203c\ufe0f", 1514, "0.6", None),
    ("exclamation_question_mark", "\u2049\ufe0f", 1515, "0.6", None),
    ("red_question_mark", "\u2753", 1516, "0.6", None),
    ("white_question_mark", "\u2754", 1517, "0.6", None),
    ("white_exclamation_mark", "\u2755", 1518, "0.6", None),
    ("red_exclamation_mark", "\u2757", 1519, "0.6", None),
    ("wavy_dash", "\u3030\ufe0f", 1520, "0.6", None),
    ("currency_exchange", "\U0001f4b1", 1521, "0.6", None),
    ("heavy_dollar_sign", "\U0001f4b2", 1522, "0.6", None),
    ("medical_symbol", "\u2695\ufe0f", 1523, "4.0", None),
    ("recycling_symbol", "\u267b\ufe0f", 1524, "0.6", None),
    ("fleur_de_lis", "\u269c\ufe0f", 1525, "1.0", None),
    ("trident_emblem", "\U0001f531", 1526, "0.6", None),
    ("name_badge", "\U0001f4db", 1527, "0.6", None),
    ("japanese_symbol_for_beginner", "\U0001f530", 1528, "0.6", None),
    ("hollow_red_circle", "\u2b55", 1529, "0.6", None),
    ("check_mark_button", "\u2705", 1530, "0.6", None),
    ("check_box_with_check", "\u2611\ufe0f", 1531, "0.6", None),
    ("check_mark", "\u2714\ufe0f", 1532, "0.6", None),
    ("cross_mark", "\u274c", 1533, "0.6", None),
    ("cross_mark_button", "\u274e", 1534, "0.6", None),
    ("curly_loop", "\u27b0", 1535, "0.6", None),
    ("double_curly_loop", "\u27bf", 1536, "1.0", None),
    ("part_alternation_mark", "\u303d\ufe0f", 1537, "0.6", None),
    ("eight_spoked_asterisk", "\u2733\ufe0f", 1538, "0.6", None),
    ("eight_pointed_star", "\u2734\ufe0f", 1539, "0.6", None),
    ("sparkle", "\u2747\ufe0f", 1540, "0.6", None),
    ("copyright", "\xa9\ufe0f", 1541, "0.6", None),
    ("registered", "\xae\ufe0f", 1542, "0.6", None),
    ("trade_mark", "\u2122\ufe0f", 1543, "0.6", None),
    ("keycap_number_sign", "#\ufe0f\u20e3", 1544, "0.6", None),
    ("keycap_asterisk", "*\ufe0f\u20e3", 1545, "2.0", None),
    ("keycap_0", "0\ufe0f\u20e3", 1546, "0.6", None),
    ("keycap_1", "1\ufe0f\u20e3", 1547, "0.6", None),
    ("keycap_2", "2\ufe0f\u20e3", 1548, "0.6", None),
    ("keycap_3", "3\ufe0f\u20e3", 1549, "0.6", None),
    ("keycap_4", "4\ufe0f\u20e3", 1550, "0.6", None),
    ("keycap_5", "5\ufe0f\u20e3", 1551, "0.6", None),
    ("keycap_6", "6\ufe0f\u20e3", 1552, "0.6", None),
    ("keycap_7", "7\ufe0f\u20e3", 1553, "0.6", None),
    ("keycap_8", "8\ufe0f\u20e3", 1554, "0.6", None),
    ("keycap_9", "9\ufe0f\u20e3", 1555, "0.6", None),
    ("keycap_10", "\U0001f51f", 1556, "0.6", None),
    ("input_latin_uppercase", "\U0001f520", 1557, "0.6", None),
    ("input_latin_lowercase", "\U0001f521", 1558, "0.6", None),
    ("input_numbers", "\U0001f522", 1559, "0.6", None),
    ("input_symbols", "\U0001f523", 1560, "0.6", None),
    ("input_latin_letters", "\U0001f524", 1561, "0.6", None),
    ("a_button_blood_type", "\U0001f170\ufe0f", 1562, "0.6", None),
    ("ab_button_blood_type", "\U0001f18e", 1563, "0.6", None),
    ("b_button_blood_type", "\U0001f171\ufe0f", 1564, "0.6", None),
    ("cl_button", "\U0001f191", 1565, "0.6", None),
    ("cool_button", "\U0001f192", 1566, "0.6", None),
    ("free_button", "\U0001f193", 1567, "0.6", None),
    ("information", "\u2139\ufe0f", 1568, "0.6", None),
    ("id_button", "\U0001f194", 1569, "0.6", None),
    ("circled_m", "\u24c2\ufe0f", 1570, "0.6", None),
    ("new_button", "\U0001f195", 1571, "0.6", None),
    ("ng_button", "\U0001f196", 1572, "0.6", None),
    ("o_button_blood_type", "\U0001f17e\ufe0f", 1573, "0.6", None),
    ("ok_button", "\U0001f197", 1574, "0.6", None),
    ("p_button", "\U0001f17f\ufe0f", 1575, "0.6", None),
    ("sos_button", "\U0001f198", 1576, "0.6", None),
    ("up_button", "\U0001f199", 1577, "0.6", None),
    ("vs_button", "\U0001f19a", 1578, "0.6", None),
    ("japanese_here_button", "\U0001f201", 1579, "0.6", None),
    ("japanese_service_charge_button", "\U0001f202\ufe0f", 1580, "0.6", None),
    ("japanese_monthly_amount_button", "\U0001f237\ufe0f", 1581, "0.6", None),
    ("japanese_not_free_of_charge_button", "\U0001f236", 1582, "0.6", None),
    ("japanese_reserved_button", "\U0001f22f", 1583, "0.6", None),
    ("japanese_bargain_button", "\U0001f250", 1584, "0.6", None),
    ("japanese_discount_button", "\U0001f239", 1585, "0.6", None),
    ("japanese_free_of_charge_button", "\U0001f21a", 1586, "0.6", None),
    ("japanese_prohibited_button", "\U0001f232", 1587, "0.6", None),
    ("japanese_acceptable_button", "\U0001f251", 1588, "0.6", None),
    ("japanese_application_button", "\U0001f238", 1589, "0.6", None),
    ("japanese_passing_grade_button", "\U0001f234", 1590, "0.6", None),
    ("japanese_vacancy_button", "\U0001f233", 1591, "0.6", None),
    ("japanese_congratulations_button", "\u3297\ufe0f", 1592, "0.6", None),
    ("japanese_secret_button", "\u3299\ufe0f", 1593, "0.6", None),
    ("japanese_open_for_business_button", "\U0001f23a", 1594, "0.6", None),
    ("japanese_no_vacancy_button", "\U0001f235", 1595, "0.6", None),
    ("red_circle", "\U0001f534", 1596, "0.6", None),
    ("orange_circle", "\U0001f7e0", 1597, "12.0", None),
    ("yellow_circle", "\U0001f7e1", 1598, "12.0", None),
    ("green_circle", "\U0001f7e2", 1599, "12.0", None),
    ("blue_circle", "\U0001f535", 1600, "0.6", None),
    ("purple_circle", "\U0001f7e3", 1601, "12.0", None),
    ("brown_circle", "\U0001f7e4", 1602, "12.0", None),
    ("black_circle", "\u26ab", 1603, "0.6", None),
    ("white_circle", "\u26aa", 1604, "0.6", None),
    ("red_square", "\U0001f7e5", 1605, "12.0", None),
    ("orange_square", "\U0001f7e7", 1606, "12.0", None),
    ("yellow_square", "\U0001f7e8", 1607, "12.0", None),
    ("green_square", "\U0001f7e9", 1608, "12.0", None),
    ("blue_square", "\U0001f7e6", 1609, "12.0", None),
    ("purple_square", "\U0001f7ea", 1610, "12.0", None),
    ("brown_square", "\U0001f7eb", 1611, "12.0", None),
    ("black_large_square", "\u2b1b", 1612, "0.6", None),
    ("white_large_square", "\u2b1c", 1613, "0.6", None),
    ("black_medium_square", "\u25fc\ufe0f", 1614, "0.6", None),
    ("white_medium_square", "\u25fb\ufe0f", 1615, "0.6", None),
    ("black_medium_small_square", "\u25fe", 1616, "0.6", None),
    ("white_medium_small_square", "\u25fd", 1617, "0.6", None),
    ("black_small_square", "\u25aa\ufe0f", 1618, "0.6", None),
    ("white_small_square", "\u25ab\ufe0f", 1619, "0.6", None),
    ("large_orange_diamond", "\U0001f536", 1620, "0.6", None),
    ("large_blue_diamond", "\U0001f537", 1621, "0.6", None),
    ("small_orange_diamond", "\U0001f538", 1622, "0.6", None),
    ("small_blue_diamond", "\U0001f539", 1623, "0.6", None),
    ("red_triangle_pointed_up", "\U0001f53a", 1624, "0.6", None),
    ("red_triangle_pointed_down", "\U0001f53b", 1625, "0.6", None),
    ("diamond_with_a_dot", "\U0001f4a0", 1626, "0.6", None),
    ("radio_button", "\U0001f518", 1627, "0.6", None),
    ("white_square_button", "\U0001f533", 1628, "0.6", None),
    ("black_square_button", "\U0001f532", 1629, "0.6", None),
    # flags
    ("chequered_flag", "\U0001f3c1", 1630, "0.6", None),
    ("triangular_flag", "\U0001f6a9", 1631, "0.6", None),
    ("crossed_flags", "\U0001f38c", 1632, "0.6", None),
    ("black_flag", "\U0001f3f4", 1633, "1.0", None),
    ("white_flag", "\U0001f3f3\ufe0f", 1634, "0.7", None),
    ("rainbow_flag", "\U0001f3f3\ufe0f\u200d\U0001f308", 1635, "4.0", None),
    ("transgender_flag", "\U0001f3f3\ufe0f\u200d\u26a7\ufe0f", 1636, "13.0", None),
    ("pirate_flag", "\U0001f3f4\u200d\u2620\ufe0f", 1637, "11.0", None),
    ("flag_ascension_island", "\U0001f1e6\U0001f1e8", 1638, "2.0", None),
    ("flag_andorra", "\U0001f1e6\U0001f1e9", 1639, "2.0", None),
    ("flag_united_arab_emirates", "\U0001f1e6\U0001f1ea", 1640, "2.0", None),
    ("flag_afghanistan", "\U0001f1e6\U0001f1eb", 1641, "2.0", None),
    ("flag_antigua_barbuda", "\U0001f1e6\U0001f1ec", 1642, "2.0", None),
    ("flag_anguilla", "\U0001f1e6\U0001f1ee", 1643, "2.0", None),
    ("flag_albania", "\U0001f1e6\U0001f1f1", 1644, "2.0", None),
    ("flag_armenia", "\U0001f1e6\U0001f1f2", 1645, "2.0", None),
    ("flag_angola", "\U0001f1e6\U0001f1f4", 1646, "2.0", None),
    ("flag_antarctica", "\U0001f1e6\U0001f1f6", 1647, "2.0", None),
    ("flag_argentina", "\U0001f1e6\U0001f1f7", 1648, "2.0", None),
    ("flag_american_samoa", "\U0001f1e6\U0001f1f8", 1649, "2.0", None),
    ("flag_austria", "\U0001f1e6\U0001f1f9", 1650, "2.0", None),
    ("flag_australia", "\U0001f1e6\U0001f1fa", 1651, "2.0", None),
    ("flag_aruba", "\U0001f1e6\U0001f1fc", 1652, "2.0", None),
    ("flag_aland_islands", "\U0001f1e6\U0001f1fd", 1653, "2.0", None),
    ("flag_azerbaijan", "\U0001f1e6\U0001f1ff", 1654, "2.0", None),
    ("flag_bosnia_herzegovina", "\U0001f1e7\U0001f1e6", 1655, "2.0", None),
    ("flag_barbados", "\U0001f1e7\U0001f1e7", 1656, "2.0", None),
    ("flag_bangladesh", "\U0001f1e7\U0001f1e9", 1657, "2.0", None),
    ("flag_belgium", "\U0001f1e7\U0001f1ea", 1658, "2.0", None),
    ("flag_burkina_faso", "\U0001f1e7\U0001f1eb", 1659, "2.0", None),
    ("flag_bulgaria", "\U0001f1e7\U0001f1ec", 1660, "2.0", None),
    ("flag_bahrain", "\U0001f1e7\U0001f1ed", 1661, "2.0", None),
    ("flag_burundi", "\U0001f1e7\U0001f1ee", 1662, "2.0", None),
    ("flag_benin", "\U0001f1e7\U0001f1ef", 1663, "2.0", None),
    ("flag_st_barthelemy", "\U0001f1e7\U0001f1f1", 1664, "2.0", None),
    ("flag_bermuda", "\U0001f1e7\U0001f1f2", 1665, "2.0", None),
    ("flag_brunei", "\U0001f1e7\U0001f1f3", 1666, "2.0", None),
    ("flag_bolivia", "\U0001f1e7\U0001f1f4", 1667, "2.0", None),
    ("flag_caribbean_netherlands", "\U0001f1e7\U0001f1f6", 1668, "2.0", None),
    ("flag_brazil", "\U0001f1e7\U0001f1f7", 1669, "2.0", None),
    ("flag_bahamas", "\U0001f1e7\U0001f1f8", 1670, "2.0", None),
    ("flag_bhutan", "\U0001f1e7\U0001f1f9", 1671, "2.0", None),
    ("flag_bouvet_island", "\U0001f1e7\U0001f1fb", 1672, "2.0", None),
    ("flag_botswana", "\U0001f1e7\U0001f1fc", 1673, "2.0", None),
    ("flag_belarus", "\U0001f1e7\U0001f1fe", 1674, "2.0", None),
    ("flag_belize", "\U0001f1e7\U0001f1ff", 1675, "2.0", None),
    ("flag_canada", "\U0001f1e8\U0001f1e6", 1676, "2.0", None),
    ("flag_cocos_keeling_islands", "\U0001f1e8\U0001f1e8", 1677, "2.0", None),
    ("flag_congo_kinshasa", "\U0001f1e8\U0001f1e9", 1678, "2.0", None),
    ("flag_central_african_republic", "\U0001f1e8\U0001f1eb", 1679, "2.0", None),
    ("flag_congo_brazzaville", "\U0001f1e8\U0001f1ec", 1680, "2.0", None),
    ("flag_switzerland", "\U0001f1e8\U0001f1ed", 1681, "2.0", None),
    ("flag_cote_divoire", "\U0001f1e8\U0001f1ee", 1682, "2.0", None),
    ("flag_cook_islands", "\U0001f1e8\U0001f1f0", 1683, "2.0", None),
    ("flag_chile", "\U0001f1e8\U0001f1f1", 1684, "2.0", None),
    ("flag_cameroon", "\U0001f1e8\U0001f1f2", 1685, "2.0", None),
    ("flag_china", "\U0001f1e8\U0001f1f3", 1686, "0.6", None),
    ("flag_colombia", "\U0001f1e8\U0001f1f4", 1687, "2.0", None),
    ("flag_clipperton_island", "\U0001f1e8\U0001f1f5", 1688, "2.0", None),
    ("flag_costa_rica", "\U0001f1e8\U0001f1f7", 1689, "2.0", None),
    ("flag_cuba", "\U0001f1e8\U0001f1fa", 1690, "2.0", None),
    ("flag_cape_verde", "\U0001f1e8\U0001f1fb", 1691, "2.0", None),
    ("flag_curacao", "\U0001f1e8\U0001f1fc", 1692, "2.0", None),
    ("flag_christmas_island", "\U0001f1e8\U0001f1fd", 1693, "2.0", None),
    ("flag_cyprus", "\U0001f1e8\U0001f1fe", 1694, "2.0", None),
    ("flag_czechia", "\U0001f1e8\U0001f1ff", 1695, "2.0", None),
    ("flag_germany", "\U0001f1e9\U0001f1ea", 1696, "0.6", None),
    ("flag_diego_garcia", "\U0001f1e9\U0001f1ec", 1697, "2.0", None),
    ("flag_djibouti", "\U0001f1e9\U0001f1ef", 1698, "2.0", None),
    ("flag_denmark", "\U0001f1e9\U0001f1f0", 1699, "2.0", None),
    ("flag_dominica", "\U0001f1e9\U0001f1f2", 1700, "2.0", None),
    ("flag_dominican_republic", "\U0001f1e9\U0001f1f4", 1701, "2.0", None),
    ("flag_algeria", "\U0001f1e9\U0001f1ff", 1702, "2.0", None),
    ("flag_ceuta_melilla", "\U0001f1ea\U0001f1e6", 1703, "2.0", None),
    ("flag_ecuador", "\U0001f1ea\U0001f1e8", 1704, "2.0", None),
    ("flag_estonia", "\U0001f1ea\U0001f1ea", 1705, "2.0", None),
    ("flag_egypt", "\U0001f1ea\U0001f1ec", 1706, "2.0", None),
    ("flag_western_sahara", "\U0001f1ea\U0001f1ed", 1707, "2.0", None),
    ("flag_eritrea", "\U0001f1ea\U0001f1f7", 1708, "2.0", None),
    ("flag_spain", "\U0001f1ea\U0001f1f8", 1709, "0.6", None),
    ("flag_ethiopia", "\U0001f1ea\U0001f1f9", 1710, "2.0", None),
    ("flag_european_union", "\U0001f1ea\U0001f1fa", 1711, "2.0", None),
    ("flag_finland", "\U0001f1eb\U0001f1ee", 1712, "2.0", None),
    ("flag_fiji", "\U0001f1eb\U0001f1ef", 1713, "2.0", None),
    ("flag_falkland_islands", "\U0001f1eb\U0001f1f0", 1714, "2.0", None),
    ("flag_micronesia", "\U0001f1eb\U0001f1f2", 1715, "2.0", None),
    ("flag_faroe_islands", "\U0001f1eb\U0001f1f4", 1716, "2.0", None),
    ("flag_france", "\U0001f1eb\U0001f1f7", 1717, "0.6", None),
    ("flag_gabon", "\U0001f1ec\U0001f1e6", 1718, "2.0", None),
    ("flag_united_kingdom", "\U0001f1ec\U0001f1e7", 1719, "0.6", None),
    ("flag_grenada", "\U0001f1ec\U0001f1e9", 1720, "2.0", None),
    ("flag_georgia", "\U0001f1ec\U0001f1ea", 1721, "2.0", None),
    ("flag_french_guiana", "\U0001f1ec\U0001f1eb", 1722, "2.0", None),
    ("flag_guernsey", "\U0001f1ec\U0001f1ec", 1723, "2.0", None),
    ("flag_ghana", "\U0001f1ec\U0001f1ed", 1724, "2.0", None),
    ("flag_gibraltar", "\U0001f1ec\U0001f1ee", 1725, "2.0", None),
    ("flag_greenland", "\U0001f1ec\U0001f1f1", 1726, "2.0", None),
    ("flag_gambia", "\U0001f1ec\U0001f1f2", 1727, "2.0", None),
    ("flag_guinea", "\U0001f1ec\U0001f1f3", 1728, "2.0", None),
    ("flag_guadeloupe", "\U0001f1ec\U0001f1f5", 1729, "2.0", None),
    ("flag_equatorial_guinea", "\U0001f1ec\U0001f1f6", 1730, "2.0", None),
    ("flag_greece", "\U0001f1ec\U0001f1f7", 1731, "2.0", None),
    ("flag_south_georgia_south_sandwich_islands", "\U0001f1ec\U0001f1f8", 1732, "2.0", None),
    ("flag_guatemala", "\U0001f1ec\U0001f1f9", 1733, "2.0", None),
    ("flag_guam", "\U0001f1ec\U0001f1fa", 1734, "2.0", None),
    ("flag_guinea_bissau", "\U0001f1ec\U0001f1fc", 1735, "2.0", None),
    ("flag_guyana", "\U0001f1ec\U0001f1fe", 1736, "2.0", None),
    ("flag_hong_kong_sar_china", "\U0001f1ed\U0001f1f0", 1737, "2.0", None),
    ("flag_heard_mcdonald_islands", "\U0001f1ed\U0001f1f2", 1738, "2.0", None),
    ("flag_honduras", "\U0001f1ed\U0001f1f3", 1739, "2.0", None),
    ("flag_croatia", "\U0001f1ed\U0001f1f7", 1740, "2.0", None),
    ("flag_haiti", "\U0001f1ed\U0001f1f9", 1741, "2.0", None),
    ("flag_hungary", "\U0001f1ed\U0001f1fa", 1742, "2.0", None),
    ("flag_canary_islands", "\U0001f1ee\U0001f1e8", 1743, "2.0", None),
    ("flag_indonesia", "\U0001f1ee\U0001f1e9", 1744, "2.0", None),
    ("flag_ireland", "\U0001f1ee\U0001f1ea", 1745, "2.0", None),
    ("flag_israel", "\U0001f1ee\U0001f1f1", 1746, "2.0", None),
    ("flag_isle_of_man", "\U0001f1ee\U0001f1f2", 1747, "2.0", None),
    ("flag_india", "\U0001f1ee\U0001f1f3", 1748, "2.0", None),
    ("flag_british_indian_ocean_territory", "\U0001f1ee\U0001f1f4", 1749, "2.0", None),
    ("flag_iraq", "\U0001f1ee\U0001f1f6", 1750, "2.0", None),
    ("flag_iran", "\U0001f1ee\U0001f1f7", 1751, "2.0", None),
    ("flag_iceland", "\U0001f1ee\U0001f1f8", 1752, "2.0", None),
    ("flag_italy", "\U0001f1ee\U0001f1f9", 1753, "0.6", None),
    ("flag_jersey", "\U0001f1ef\U0001f1ea", 1754, "2.0", None),
    ("flag_jamaica", "\U0001f1ef\U0001f1f2", 1755, "2.0", None),
    ("flag_jordan", "\U0001f1ef\U0001f1f4", 1756, "2.0", None),
    ("flag_japan", "\U0001f1ef\U0001f1f5", 1757, "0.6", None),
    ("flag_kenya", "\U0001f1f0\U0001f1ea", 1758, "2.0", None),
    ("flag_kyrgyzstan", "\U0001f1f0\U0001f1ec", 1759, "2.0", None),
    ("flag_cambodia", "\U0001f1f0\U0001f1ed", 1760, "2.0", None),
    ("flag_kiribati", "\U0001f1f0\U0001f1ee", 1761, "2.0", None),
    ("flag_comoros", "\U0001f1f0\U0001f1f2", 1762, "2.0", None),
    ("flag_st_kitts_nevis", "\U0001f1f0\U0001f1f3", 1763, "2.0", None),
    ("flag_north_korea", "\U0001f1f0\U0001f1f5", 1764, "2.0", None),
    ("flag_south_korea", "\U0001f1f0\U0001f1f7", 1765, "0.6", None),
    ("flag_kuwait", "\U0001f1f0\U0001f1fc", 1766, "2.0", None),
    ("flag_cayman_islands", "\U0001f1f0\U0001f1fe", 1767, "2.0", None),
    ("flag_kazakhstan", "\U0001f1f0\U0001f1ff", 1768, "2.0", None),
    ("flag_laos", "\U0001f1f1\U0001f1e6", 1769, "2.0", None),
    ("flag_lebanon", "\U0001f1f1\U0001f1e7", 1770, "2.0", None),
    ("flag_st_lucia", "\U0001f1f1\U0001f1e8", 1771, "2.0", None),
    ("flag_liechtenstein", "\U0001f1f1\U0001f1ee", 1772, "2.0", None),
    ("flag_sri_lanka", "\U0001f1f1\U0001f1f0", 1773, "2.0", None),
    ("flag_liberia", "\U0001f1f1\U0001f1f7", 1774, "2.0", None),
    ("flag_lesotho", "\U0001f1f1\U0001f1f8", 1775, "2.0", None),
    ("flag_lithuania", "\U0001f1f1\U0001f1f9", 1776, "2.0", None),
    ("flag_luxembourg", "\U0001f1f1\U0001f1fa", 1777, "2.0", None),
    ("flag_latvia", "\U0001f1f1\U0001f1fb", 1778, "2.0", None),
    ("flag_libya", "\U0001f1f1\U0001f1fe", 1779, "2.0", None),
    ("flag_morocco", "\U0001f1f2\U0001f1e6", 1780, "2.0", None),
    ("flag_monaco", "\U0001f1f2\U0001f1e8", 1781, "2.0", None),
    ("flag_moldova", "\U0001f1f2\U0001f1e9", 1782, "2.0", None),
    ("flag_montenegro", "\U0001f1f2\U0001f1ea", 1783, "2.0", None),
    ("flag_st_martin", "\U0001f1f2\U0001f1eb", 1784, "2.0", None),
    ("flag_madagascar", "\U0001f1f2\U0001f1ec", 1785, "2.0", None),
    ("flag_marshall_islands", "\U0001f1f2\U0001f1ed", 1786, "2.0", None),
    ("flag_north_macedonia", "\U0001f1f2\U0001f1f0", 1787, "2.0", None),
    ("flag_mali", "\U0001f1f2\U0001f1f1", 1788, "2.0", None),
    ("flag_myanmar_burma", "\U0001f1f2\U0001f1f2", 1789, "2.0", None),
    ("flag_mongolia", "\U0001f1f2\U0001f1f3", 1790, "2.0", None),
    ("flag_macao_sar_china", "\U0001f1f2\U0001f1f4", 1791, "2.0", None),
    ("flag_northern_mariana_islands", "\U0001f1f2\U0001f1f5", 1792, "2.0", None),
    ("flag_martinique", "\U0001f1f2\U0001f1f6", 1793, "2.0", None),
    ("flag_mauritania", "\U0001f1f2\U0001f1f7", 1794, "2.0", None),
    ("flag_montserrat", "\U0001f1f2\U0001f1f8", 1795, "2.0", None),
    ("flag_malta", "\U0001f1f2\U0001f1f9", 1796, "2.0", None),
    ("flag_mauritius", "\U0001f1f2\U0001f1fa", 1797, "2.0", None),
    ("flag_maldives", "\U0001f1f2\U0001f1fb", 1798, "2.0", None),
    ("flag_malawi", "\U0001f1f2\U0001f1fc", 1799, "2.0", None),
    ("flag_mexico", "\U0001f1f2\U0001f1fd", 1800, "2.0", None),
    ("flag_malaysia", "\U0001f1f2\U0001f1fe", 1801, "2.0", None),
    ("flag_mozambique", "\U0001f1f2\U0001f1ff", 1802, "2.0", None),
    ("flag_namibia", "\U0001f1f3\U0001f1e6", 1803, "2.0", None),
    ("flag_new_caledonia", "\U0001f1f3\U0001f1e8", 1804, "2.0", None),
    ("flag_niger", "\U0001f1f3\U0001f1ea", 1805, "2.0", None),
    ("flag_norfolk_island", "\U0001f1f3\U0001f1eb", 1806, "2.0", None),
    ("flag_nigeria", "\U0001f1f3\U0001f1ec", 1807, "2.0", None),
    ("flag_nicaragua", "\U0001f1f3\U0001f1ee", 1808, "2.0", None),
    ("flag_netherlands", "\U0001f1f3\U0001f1f1", 1809, "2.0", None),
    ("flag_norway", "\U0001f1f3\U0001f1f4", 1810, "2.0", None),
    ("flag_nepal", "\U0001f1f3\U0001f1f5", 1811, "2.0", None),
    ("flag_nauru", "\U0001f1f3\U0001f1f7", 1812, "2.0", None),
    ("flag_niue", "\U0001f1f3\U0001f1fa", 1813, "2.0", None),
    ("flag_new_zealand", "\U0001f1f3\U0001f1ff", 1814, "2.0", None),
    ("flag_oman", "\U0001f1f4\U0001f1f2", 1815, "2.0", None),
    ("flag_panama", "\U0001f1f5\U0001f1e6", 1816, "2.0", None),
    ("flag_peru", "\U0001f1f5\U0001f1ea", 1817, "2.0", None),
    ("flag_french_polynesia", "\U0001f1f5\U0001f1eb", 1818, "2.0", None),
    ("flag_papua_new_guinea", "\U0001f1f5\U0001f1ec", 1819, "2.0", None),
    ("flag_philippines", "\U0001f1f5\U0001f1ed", 1820, "2.0", None),
    ("flag_pakistan", "\U0001f1f5\U0001f1f0", 1821, "2.0", None),
    ("flag_poland", "\U0001f1f5\U0001f1f1", 1822, "2.0", None),
    ("flag_st_pierre_miquelon", "\U0001f1f5\U0001f1f2", 1823, "2.0", None),
    ("flag_pitcairn_islands", "\U0001f1f5\U0001f1f3", 1824, "2.0", None),
    ("flag_puerto_rico", "\U0001f1f5\U0001f1f7", 1825, "2.0", None),
    ("flag_palestinian_territories", "\U0001f1f5\U0001f1f8", 1826, "2.0", None),
    ("flag_portugal", "\U0001f1f5\U0001f1f9", 1827, "2.0", None),
    ("flag_palau", "\U0001f1f5\U0001f1fc", 1828, "2.0", None),
    ("flag_paraguay", "\U0001f1f5\U0001f1fe", 1829, "2.0", None),
    ("flag_qatar", "\U0001f1f6\U0001f1e6", 1830, "2.0", None),
    ("flag_reunion", "\U0001f1f7\U0001f1ea", 1831, "2.0", None),
    ("flag_romania", "\U0001f1f7\U0001f1f4", 1832, "2.0", None),
    ("flag_serbia", "\U0001f1f7\U0001f1f8", 1833, "2.0", None),
    ("flag_russia", "\U0001f1f7\U0001f1fa", 1834, "0.6", None),
    ("flag_rwanda", "\U0001f1f7\U0001f1fc", 1835, "2.0", None),
    ("flag_saudi_arabia", "\U0001f1f8\U0001f1e6", 1836, "2.0", None),
    ("flag_solomon_islands", "\U0001f1f8\U0001f1e7", 1837, "2.0", None),
    ("flag_seychelles", "\U0001f1f8\U0001f1e8", 1838, "2.0", None),
    ("flag_sudan", "\U0001f1f8\U0001f1e9", 1839, "2.0", None),
    ("flag_sweden", "\U0001f1f8\U0001f1ea", 1840, "2.0", None),
    ("flag_singapore", "\U0001f1f8\U0001f1ec", 1841, "2.0", None),
    ("flag_st_helena", "\U0001f1f8\U0001f1ed", 1842, "2.0", None),
    ("flag_slovenia", "\U0001f1f8\U0001f1ee", 1843, "2.0", None),
    ("flag_svalbard_jan_mayen", "\U0001f1f8\U0001f1ef", 1844, "2.0", None),
    ("flag_slovakia", "\U0001f1f8\U0001f1f0", 1845, "2.0", None),
    ("flag_sierra_leone", "\U0001f1f8\U0001f1f1", 1846, "2.0", None),
    ("flag_san_marino", "\U0001f1f8\U0001f1f2", 1847, "2.0", None),
    ("flag_senegal", "\U0001f1f8\U0001f1f3", 1848, "2.0", None),
    ("flag_somalia", "\U0001f1f8\U0001f1f4", 1849, "2.0", None),
    ("flag_suriname", "\U0001f1f8\U0001f1f7", 1850, "2.0", None),
    ("flag_south_sudan", "\U0001f1f8\U0001f1f8", 1851, "2.0", None),
    ("flag_sao_tome_principe", "\U0001f1f8\U0001f1f9", 1852, "2.0", None),
    ("flag_el_salvador", "\U0001f1f8\U0001f1fb", 1853, "2.0", None),
    ("flag_sint_maarten", "\U0001f1f8\U0001f1fd", 1854, "2.0", None),
    ("flag_syria", "\U0001f1f8\U0001f1fe", 1855, "2.0", None),
    ("flag_eswatini", "\U0001f1f8\U0001f1ff", 1856, "2.0", None),
    ("flag_tristan_da_cunha", "\U0001f1f9\U0001f1e6", 1857, "2.0", None),
    ("flag_turks_caicos_islands", "\U0001f1f9\U0001f1e8", 1858, "2.0", None),
    ("flag_chad", "\U0001f1f9\U0001f1e9", 1859, "2.0", None),
    ("flag_french_southern_territories", "\U0001f1f9\U0001f1eb", 1860, "2.0", None),
    ("flag_togo", "\U0001f1f9\U0001f1ec", 1861, "2.0", None),
    ("flag_thailand", "\U0001f1f9\U0001f1ed", 1862, "2.0", None),
    ("flag_tajikistan", "\U0001f1f9\U0001f1ef", 1863, "2.0", None),
    ("flag_tokelau", "\U0001f1f9\U0001f1f0", 1864, "2.0", None),
    ("flag_timor_leste", "\U0001f1f9\U0001f1f1", 1865, "2.0", None),
    ("flag_turkmenistan", "\U0001f1f9\U0001f1f2", 1866, "2.0", None),
    ("flag_tunisia", "\U0001f1f9\U0001f1f3", 1867, "2.0", None),
    ("flag_tonga", "\U0001f1f9\U0001f1f4", 1868, "2.0", None),
    ("flag_turkiye", "\U0001f1f9\U0001f1f7", 1869, "2.0", None),
    ("flag_trinidad_tobago", "\U0001f1f9\U0001f1f9", 1870, "2.0", None),
    ("flag_tuvalu", "\U0001f1f9\U0001f1fb", 1871, "2.0", None),
    ("flag_taiwan", "\U0001f1f9\U0001f1fc", 1872, "2.0", None),
    ("flag_tanzania", "\U0001f1f9\U0001f1ff", 1873, "2.0", None),
    ("flag_ukraine", "\U0001f1fa\U0001f1e6", 1874, "2.0", None),
    ("flag_uganda", "\U0001f1fa\U0001f1ec", 1875, "2.0", None),
    ("flag_u_s_outlying_islands", "\U0001f1fa\U0001f1f2", 1876, "2.0", None),
    ("flag_united_nations", "\U0001f1fa\U0001f1f3", 1877, "4.0", None),
    ("flag_united_states", "\U0001f1fa\U0001f1f8", 1878, "0.6", None),
    ("flag_uruguay", "\U0001f1fa\U0001f1fe", 1879, "2.0", None),
    ("flag_uzbekistan", "\U0001f1fa\U0001f1ff", 1880, "2.0", None),
    ("flag_vatican_city", "\U0001f1fb\U0001f1e6", 1881, "2.0", None),
    ("flag_st_vincent_grenadines", "\U0001f1fb\U0001f1e8", 1882, "2.0", None),
    ("flag_venezuela", "\U0001f1fb\U0001f1ea", 1883, "2.0", None),
    ("flag_british_virgin_islands", "\U0001f1fb\U0001f1ec", 1884, "2.0", None),
    ("flag_u_s_virgin_islands", "\U0001f1fb\U0001f1ee", 1885, "2.0", None),
    ("flag_vietnam", "\U0001f1fb\U0001f1f3", 1886, "2.0", None),
    ("flag_vanuatu", "\U0001f1fb\U0001f1fa", 1887, "2.0", None),
    ("flag_wallis_futuna", "\U0001f1fc\U0001f1eb", 1888, "2.0", None),
    ("flag_samoa", "\U0001f1fc\U0001f1f8", 1889, "2.0", None),
    ("flag_kosovo", "\U0001f1fd\U0001f1f0", 1890, "2.0", None),
    ("flag_yemen", "\U0001f1fe\U0001f1ea", 1891, "2.0", None),
    ("flag_mayotte", "\U0001f1fe\U0001f1f9", 1892, "2.0", None),
    ("flag_south_africa", "\U0001f1ff\U0001f1e6", 1893, "2.0", None),
    ("flag_zambia", "\U0001f1ff\U0001f1f2", 1894, "2.0", None),
    ("flag_zimbabwe", "\U0001f1ff\U0001f1fc", 1895, "2.0", None),
    (
        "flag_england",
        "\U0001f3f4\U000e0067\U000e0062\U000e0065\U000e006e\U000e0067\U000e007f",
        1896,
        "5.0",
        None,
    ),
    (
        "flag_scotland",
        "\U0001f3f4\U000e0067\U000e0062\U000e0073\U000e0063\U000e0074\U000e007f",
        1897,
        "5.0",
        None,
    ),
    (
        "flag_wales",
        "\U0001f3f4\U000e0067\U000e0062\U000e0077\U000e006c\U000e0073\U000e007f",
        1898,
        "5.0",
        None,
    ),
)
